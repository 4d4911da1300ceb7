"""
models/property.py
------------------
Domain models for rental property listings.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from utils.money import from_minor_units


@dataclass
class Property:
    """
    A stored property listing as returned by the repository.

    Attributes:
        cost_per_night: Nightly price in cents, as stored.
        average_rating: Mean review rating, when the query computes one.
    """
    id: int
    owner_id: int
    title: str
    description: Optional[str]
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool = True
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in currency units."""
        return from_minor_units(self.cost_per_night)

    def __str__(self) -> str:
        rating = f"{self.average_rating:.2f}" if self.average_rating is not None else "-"
        return f"#{self.id} {self.title} | {self.city} | ${self.price_per_night:.2f}/night | rating {rating}"


@dataclass
class NewProperty:
    """
    Field set for inserting a property.

    `cost_per_night` is given in currency units (dollars) and is
    converted to cents when stored.
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: Union[int, float, str, Decimal]
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
