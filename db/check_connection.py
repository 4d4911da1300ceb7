"""
db/check_connection.py
----------------------
Standalone connectivity check. Opens the pool, runs `SELECT NOW()` and
closes it again:
    python -m db.check_connection
"""

import sys

from config import DatabaseSettings
from db.connection import Database, DataAccessFailure
from utils.logger import get_logger

logger = get_logger(__name__)


def check_connection(db: Database) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        row = db.ping()
    except DataAccessFailure as e:
        logger.error(f"Database connection error: {e}")
        return False
    logger.info(f"Database connection successful: {row['now']}")
    return True


if __name__ == "__main__":
    with Database(DatabaseSettings.from_env()) as database:
        ok = check_connection(database)
    sys.exit(0 if ok else 1)
