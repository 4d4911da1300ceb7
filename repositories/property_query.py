"""
repositories/property_query.py
------------------------------
Builds the parameterized property search statement from a set of
optional filters.

Placeholders are psycopg2's positional ``%s``: the n-th placeholder in
the statement is bound to ``params[n - 1]``. Every clause is appended
together with its value, so omitting any combination of filters never
shifts or skips a binding.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from utils.money import to_minor_units

Number = Union[int, float, Decimal]

_SELECT = """SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id"""


@dataclass(frozen=True)
class PropertyFilters:
    """
    Optional search constraints. ``None`` means "not supplied"; any other
    value, including 0, is applied.

    Attributes:
        city: Substring of the city name.
        owner_id: Only properties owned by this user.
        minimum_price_per_night: Lower bound in currency units.
        maximum_price_per_night: Upper bound in currency units.
        minimum_rating: Lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[Any] = None
    minimum_price_per_night: Optional[Number] = None
    maximum_price_per_night: Optional[Number] = None
    minimum_rating: Optional[Number] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PropertyFilters":
        """
        Build filters from a form or query-string mapping, where a missing
        key, None or a blank string all mean "not supplied".

        Raises:
            ValueError: If a numeric field holds a non-numeric value.
        """
        def pick(key: str) -> Optional[Any]:
            value = options.get(key)
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    return None
            return value

        return cls(
            city=pick("city"),
            owner_id=pick("owner_id"),
            minimum_price_per_night=_coerce_number(pick("minimum_price_per_night"), "minimum_price_per_night"),
            maximum_price_per_night=_coerce_number(pick("maximum_price_per_night"), "maximum_price_per_night"),
            minimum_rating=_coerce_number(pick("minimum_rating"), "minimum_rating"),
        )


@dataclass(frozen=True)
class SearchQuery:
    """A statement and the values bound to its placeholders, in order."""
    sql: str
    params: list


def build_property_search(filters: PropertyFilters, limit: int = DEFAULT_RESULT_LIMIT) -> SearchQuery:
    """
    Assemble the search statement.

    WHERE holds city, owner and price predicates in that order and is left
    out when none apply. HAVING on the average rating follows GROUP BY and
    appears only when a minimum rating is given. The limit is always the
    last parameter.
    """
    where: list[tuple[str, Any]] = []
    if filters.city is not None:
        where.append(("city LIKE %s", f"%{filters.city}%"))
    if filters.owner_id is not None:
        where.append(("owner_id = %s", filters.owner_id))
    if filters.minimum_price_per_night is not None:
        where.append(("cost_per_night >= %s", to_minor_units(filters.minimum_price_per_night)))
    if filters.maximum_price_per_night is not None:
        where.append(("cost_per_night <= %s", to_minor_units(filters.maximum_price_per_night)))

    lines = [_SELECT]
    params: list = []
    if where:
        lines.append("WHERE " + " AND ".join(predicate for predicate, _ in where))
        params.extend(value for _, value in where)

    lines.append("GROUP BY properties.id")

    if filters.minimum_rating is not None:
        lines.append("HAVING avg(property_reviews.rating) >= %s")
        params.append(_coerce_number(filters.minimum_rating, "minimum_rating"))

    lines.append("ORDER BY cost_per_night")
    lines.append("LIMIT %s;")
    params.append(limit)

    return SearchQuery(sql="\n".join(lines), params=params)


def _coerce_number(value: Any, name: str) -> Optional[Number]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"{name} must be a finite number, got {value!r}")
        return value
    if isinstance(value, float):
        number = value
    else:
        text = str(value)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return number
