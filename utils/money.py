"""
utils/money.py
--------------
Conversions between decimal currency amounts and the integer
minor units (cents) stored in the database.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

Amount = Union[int, float, str, Decimal]

_CENTS = Decimal(100)


def to_minor_units(amount: Amount) -> int:
    """
    Convert a decimal currency amount to integer minor units.

    Args:
        amount: Dollars as a number or numeric string (e.g. 49.99, "50").

    Returns:
        round(amount * 100), rounding halves away from zero.

    Raises:
        ValueError: If the amount is not numeric.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Not a currency amount: {amount!r}")
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f"Not a currency amount: {amount!r}") from None
    if not value.is_finite():
        raise ValueError(f"Not a currency amount: {amount!r}")
    return int((value * _CENTS).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def from_minor_units(cents: int) -> Decimal:
    """Convert stored minor units back to a decimal amount."""
    return Decimal(cents) / _CENTS
