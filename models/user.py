"""
models/user.py
--------------
Domain model for application users (guests and owners).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name.
        email: Unique login email.
        password: Stored password hash, never shown in repr.
    """
    name: str
    email: str
    password: str = field(repr=False)
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
