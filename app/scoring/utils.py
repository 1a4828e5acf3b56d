"""Numeric helpers shared by the scoring modules."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence


def clamp(value: int, min_val: int = 0, max_val: int = 100) -> int:
    """Clamp an integer score to [min_val, max_val].

    Args:
        value: Value to clamp.
        min_val: Lower bound (default 0).
        max_val: Upper bound (default 100).

    Returns:
        Clamped value.
    """
    return max(min_val, min(max_val, value))


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer, halves away from zero.

    ``round()`` uses banker's rounding (``round(57.5) == 58`` but
    ``round(58.5) == 58``); portfolio averages always round .5 up.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def mean_rounded(values: Sequence[int]) -> int:
    """Arithmetic mean rounded half-up, 0 for an empty sequence.

    Args:
        values: Integer scores.

    Returns:
        Rounded mean.
    """
    if not values:
        return 0
    return round_half_up(Decimal(sum(values)) / Decimal(len(values)))
