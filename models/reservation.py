"""
models/reservation.py
---------------------
Read model for a guest's past reservations joined with the property.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from utils.money import from_minor_units


@dataclass
class ReservationSummary:
    """One past stay, with the property details shown in a listing."""
    reservation_id: int
    start_date: date
    end_date: date
    title: str
    cost_per_night: int  # cents
    cover_photo_url: str
    thumbnail_photo_url: str
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    average_rating: Optional[float] = None

    @property
    def price_per_night(self) -> Decimal:
        return from_minor_units(self.cost_per_night)

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        return f"#{self.reservation_id} {self.title} | {self.start_date} -> {self.end_date}"
