"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "lightbnb")
DB_USER: str = os.getenv("DB_USER", "development")
DB_PASS: str = os.getenv("DB_PASS", "development")

# ── Pool ──────────────────────────────────────────────────
DB_MIN_CONNECTIONS: int = int(os.getenv("DB_MIN_CONNECTIONS", "1"))
DB_MAX_CONNECTIONS: int = int(os.getenv("DB_MAX_CONNECTIONS", "20"))
DB_IDLE_TIMEOUT_SECONDS: float = float(os.getenv("DB_IDLE_TIMEOUT_SECONDS", "60"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Queries ───────────────────────────────────────────────
DEFAULT_RESULT_LIMIT: int = int(os.getenv("DEFAULT_RESULT_LIMIT", "10"))


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection and pool parameters for one database handle."""
    host: str
    port: int
    dbname: str
    user: str
    password: str
    min_connections: int = 1
    max_connections: int = 20
    idle_timeout_seconds: float = 60.0

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        return cls(
            host=DB_HOST,
            port=DB_PORT,
            dbname=DB_NAME,
            user=DB_USER,
            password=DB_PASS,
            min_connections=DB_MIN_CONNECTIONS,
            max_connections=DB_MAX_CONNECTIONS,
            idle_timeout_seconds=DB_IDLE_TIMEOUT_SECONDS,
        )

    def connect_kwargs(self) -> dict:
        """Keyword arguments accepted by psycopg2.connect()."""
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.dbname,
            "user": self.user,
            "password": self.password,
        }
