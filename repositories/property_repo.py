"""
repositories/property_repo.py
------------------------------
Data access layer for property listings: search and insert.
"""

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from models.property import NewProperty, Property
from repositories.property_query import PropertyFilters, build_property_search
from utils.logger import get_logger
from utils.money import to_minor_units

logger = get_logger(__name__)

_INSERT_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class PropertyRepository:
    """Repository for searching and creating properties."""

    def __init__(self, db: Database):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self, filters: PropertyFilters, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Property]:
        """
        Search properties matching the given filters, cheapest first.

        Only properties with at least one review are returned, each with
        its average rating.

        Args:
            filters: Optional constraints; prices are in currency units.
            limit: Maximum number of rows to return.
        """
        query = build_property_search(filters, limit)
        logger.debug(f"Property search: {' '.join(query.sql.split())} | params={query.params}")
        try:
            rows = self.db.query(query.sql, query.params)
        except Exception as e:
            logger.debug(f"Failed while searching properties: {e}")
            raise
        return [self._row_to_property(r) for r in rows]

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, new_property: NewProperty) -> Property:
        """
        Insert a property listing.

        `cost_per_night` is converted from currency units to cents here;
        callers pass the price as entered.

        Returns:
            The stored Property with its generated id.
        """
        values = {name: getattr(new_property, name) for name in _INSERT_COLUMNS}
        values["cost_per_night"] = to_minor_units(new_property.cost_per_night)

        sql = f"""
            INSERT INTO properties ({", ".join(_INSERT_COLUMNS)})
            VALUES ({", ".join(["%s"] * len(_INSERT_COLUMNS))})
            RETURNING *;
        """
        try:
            rows = self.db.query(sql, [values[name] for name in _INSERT_COLUMNS])
        except Exception as e:
            logger.debug(f"Failed while inserting property '{new_property.title}': {e}")
            raise
        stored = self._row_to_property(rows[0])
        logger.info(f"Added property #{stored.id} for owner {stored.owner_id}")
        return stored

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_property(row: dict) -> Property:
        """Convert a database row to a Property domain object."""
        rating = row.get("average_rating")
        return Property(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row.get("description"),
            thumbnail_photo_url=row["thumbnail_photo_url"],
            cover_photo_url=row["cover_photo_url"],
            cost_per_night=row["cost_per_night"],
            parking_spaces=row["parking_spaces"],
            number_of_bathrooms=row["number_of_bathrooms"],
            number_of_bedrooms=row["number_of_bedrooms"],
            country=row["country"],
            street=row["street"],
            city=row["city"],
            province=row["province"],
            post_code=row["post_code"],
            active=row.get("active", True),
            average_rating=float(rating) if rating is not None else None,
        )
