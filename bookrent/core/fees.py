"""
    Fee rules for rentals: the base charge for the requested period
    and the penalty for returning a book after its expected date.

    All amounts are Decimals quantized to cents with ROUND_HALF_UP.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from bookrent.configs import LATE_FEE_RATE

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

def round2(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)

def calculate_total_fee(daily_rate: Optional[Decimal], rental_days: Optional[int]) -> Decimal:
    """Base rental charge, rounded once after the multiplication."""
    if daily_rate is None or rental_days is None:
        return ZERO
    return round2(Decimal(daily_rate) * rental_days)

def calculate_late_fee(book_price: Optional[Decimal], days_late: int, rate: Decimal = LATE_FEE_RATE) -> Decimal:
    """`rate` of the book price for every day past the expected return date."""
    if book_price is None or days_late <= 0:
        return ZERO
    return round2(Decimal(book_price) * rate * days_late)

def days_late(expected_return_date: date, return_date: date) -> int:
    return max(0, return_date.toordinal() - expected_return_date.toordinal())
