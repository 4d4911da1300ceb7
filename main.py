"""
main.py
-------
Command-line entry point for the LightBnB data layer.

Responsibilities:
    - Open the database connection pool and close it on shutdown.
    - Expose schema setup, a connectivity check and read-only queries.

Usage:
    python main.py init-db
    python main.py check
    python main.py search --city van --min-price 50 --min-rating 4 --limit 5
    python main.py reservations 1
"""

import argparse
import signal
import sys

from config import DEFAULT_RESULT_LIMIT, DatabaseSettings
from db.check_connection import check_connection
from db.connection import Database, DataAccessFailure
from db.init_db import create_tables
from repositories.property_query import PropertyFilters
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def install_shutdown_handlers(db: Database) -> None:
    """Close the pool gracefully and exit on SIGINT / SIGTERM."""

    def _shutdown(signum, frame) -> None:
        logger.info(f"Received {signal.Signals(signum).name}, shutting down.")
        db.close_gracefully()
        sys.exit(0)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LightBnB database tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log SQL statements and parameters")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create tables if they do not exist")
    sub.add_parser("check", help="Verify the database is reachable")

    search = sub.add_parser("search", help="Search properties")
    search.add_argument("--city")
    search.add_argument("--owner-id", type=int)
    search.add_argument("--min-price", help="Minimum price per night in dollars")
    search.add_argument("--max-price", help="Maximum price per night in dollars")
    search.add_argument("--min-rating")
    search.add_argument("--limit", type=int, default=DEFAULT_RESULT_LIMIT)

    reservations = sub.add_parser("reservations", help="List a guest's past reservations")
    reservations.add_argument("guest_id", type=int)
    reservations.add_argument("--limit", type=int, default=DEFAULT_RESULT_LIMIT)
    return parser


def run(args: argparse.Namespace, db: Database) -> int:
    """Dispatch one command against an open database handle."""
    if args.command == "init-db":
        create_tables(db)
        return 0

    if args.command == "check":
        return 0 if check_connection(db) else 1

    if args.command == "search":
        filters = PropertyFilters.from_options({
            "city": args.city,
            "owner_id": args.owner_id,
            "minimum_price_per_night": args.min_price,
            "maximum_price_per_night": args.max_price,
            "minimum_rating": args.min_rating,
        })
        for prop in PropertyRepository(db).get_all_properties(filters, args.limit):
            print(prop)
        return 0

    if args.command == "reservations":
        for reservation in ReservationRepository(db).get_all_reservations(args.guest_id, args.limit):
            print(reservation)
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")

    db = Database(DatabaseSettings.from_env())
    install_shutdown_handlers(db)
    try:
        db.open()
        return run(args, db)
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2
    except DataAccessFailure as e:
        logger.error(f"Database error: {e}")
        return 1
    finally:
        db.close_gracefully()


if __name__ == "__main__":
    sys.exit(main())
