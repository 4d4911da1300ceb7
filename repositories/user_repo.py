"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import Database
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def __init__(self, db: Database):
        self.db = db

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a single user by email.

        Returns:
            The User, or None if no user has that email.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        try:
            rows = self.db.query(sql, (email,))
        except Exception as e:
            logger.debug(f"Failed while querying user by email: {e}")
            raise
        return self._row_to_user(rows[0]) if rows else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by primary key.

        Returns:
            The User, or None if not found.
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        try:
            rows = self.db.query(sql, (user_id,))
        except Exception as e:
            logger.debug(f"Failed while querying user #{user_id}: {e}")
            raise
        return self._row_to_user(rows[0]) if rows else None

    def add_user(self, name: str, email: str, password: str) -> User:
        """
        Insert a new user.

        Raises:
            psycopg2.errors.UniqueViolation: If the email is already registered.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        try:
            rows = self.db.query(sql, (name, email, password))
        except Exception as e:
            logger.debug(f"Failed while inserting user {email}: {e}")
            raise
        user = self._row_to_user(rows[0])
        logger.info(f"Added user #{user.id}")
        return user

    @staticmethod
    def _row_to_user(row: dict) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
