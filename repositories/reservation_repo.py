"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from models.reservation import ReservationSummary
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Read-side queries over reservations joined with properties."""

    def __init__(self, db: Database):
        self.db = db

    def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[ReservationSummary]:
        """
        List a guest's completed reservations, oldest stay first.

        Only reservations whose end date is before today are included.
        `average_rating` is None for properties without reviews.

        Args:
            guest_id: The user who made the reservations.
            limit: Maximum number of rows to return.
        """
        sql = """
            SELECT reservations.id AS reservation_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.title,
                   properties.cost_per_night,
                   properties.cover_photo_url,
                   properties.thumbnail_photo_url,
                   properties.parking_spaces,
                   properties.number_of_bathrooms,
                   properties.number_of_bedrooms,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s AND reservations.end_date < now()::date
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        try:
            rows = self.db.query(sql, (guest_id, limit))
        except Exception as e:
            logger.debug(f"Failed while fetching reservations for guest #{guest_id}: {e}")
            raise
        return [self._row_to_summary(r) for r in rows]

    @staticmethod
    def _row_to_summary(row: dict) -> ReservationSummary:
        rating = row.get("average_rating")
        return ReservationSummary(
            reservation_id=row["reservation_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            title=row["title"],
            cost_per_night=row["cost_per_night"],
            cover_photo_url=row["cover_photo_url"],
            thumbnail_photo_url=row["thumbnail_photo_url"],
            parking_spaces=row["parking_spaces"],
            number_of_bathrooms=row["number_of_bathrooms"],
            number_of_bedrooms=row["number_of_bedrooms"],
            average_rating=float(rating) if rating is not None else None,
        )
