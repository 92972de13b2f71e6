"""Numeric helpers shared by the scorer and gap planner."""

from decimal import ROUND_HALF_UP, Decimal

from .config import SCORE_BOUNDS, SCORE_DECIMALS


def round_half_up(value: float, decimals: int = SCORE_DECIMALS) -> float:
    """
    Round with half-up semantics on the value's shortest decimal repr.

    The built-in round() rounds half to even on the binary value,
    so 0.125 -> 0.12 and 2.675 -> 2.67. Scores must round 0.125 -> 0.13.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, bounds=SCORE_BOUNDS) -> float:
    low, high = bounds
    return max(low, min(high, value))


def ratio(part: int, whole: int) -> float:
    """part / whole, or 0.0 when whole is empty."""
    if whole == 0:
        return 0.0
    return part / whole
