"""
Utility functions for Copilot Plus.
"""

from copilot_plus.utils.date_utils import (
    MONTH_KEYS,
    get_month_range,
    get_period_range,
    month_label,
    month_of,
    normalize_month,
    previous_year,
    year_of,
)

__all__ = [
    "MONTH_KEYS",
    "get_month_range",
    "get_period_range",
    "month_label",
    "month_of",
    "normalize_month",
    "previous_year",
    "year_of",
]
