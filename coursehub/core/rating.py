"""
Average rating arithmetic.

Dependencies: decimal (stdlib)
System role: Pure rounding rule shared by the rating aggregator
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

MIN_RATING = 1
MAX_RATING = 5


def round_rating(value: float | Decimal) -> float:
    """
    Round to one decimal place, halves away from zero.

    Ratings are never negative, so ROUND_HALF_UP is away from zero.
    """
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_rating(ratings: Iterable[int]) -> float:
    """
    Compute the stored aggregate for a set of ratings.

    Args:
        ratings: Integer ratings (1-5) of the live reviews

    Returns:
        float: Mean rounded to one decimal, or 0.0 when empty
    """
    values = list(ratings)
    if not values:
        return 0.0
    return round_rating(Decimal(sum(values)) / Decimal(len(values)))
