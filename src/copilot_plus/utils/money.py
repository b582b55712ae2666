"""
Currency arithmetic helpers.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def round_cents(value: float) -> float:
    """
    Round a non-negative amount to cents, halves away from zero.

    The scaled float is converted to Decimal exactly, so 10.125 becomes
    10.13 rather than the banker's-rounded 10.12.
    """
    cents = Decimal(value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(cents) / 100


def pct_change(current: float, previous: float) -> Optional[float]:
    """Percentage change from previous to current. Returns None if previous is 0."""
    if previous == 0:
        return None
    return (current - previous) / previous * 100


def pct_of_total(part: float, total: float) -> float:
    """Share of total in percent, one decimal; 0 for an empty total."""
    if total == 0:
        return 0.0
    return round(part / total * 100, 1)
