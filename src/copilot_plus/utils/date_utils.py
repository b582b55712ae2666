"""
Date utilities for year/month keys and month ranges.

Dates in an export are ISO-like strings; the year is the first four
characters and the month the two characters at offset 5.
"""

import calendar
from typing import List, Optional, Tuple, Union

from copilot_plus.config import ALL_MONTHS, MONTH_NAMES

MONTH_KEYS: List[str] = [f"{m:02d}" for m in range(1, 13)]


def year_of(date: str) -> str:
    return date[0:4]


def month_of(date: str) -> str:
    return date[5:7]


def normalize_month(month: Optional[Union[str, int]]) -> str:
    """
    Normalize a month filter to "01".."12" or "all".

    Accepts None / "all" (full year), ints 1-12 and strings such as
    "3" or "03".

    Raises:
        ValueError: If the month cannot be interpreted
    """
    if month is None:
        return ALL_MONTHS
    if isinstance(month, str):
        value = month.strip().lower()
        if value in ("", ALL_MONTHS):
            return ALL_MONTHS
        if not value.isdigit():
            raise ValueError(f"Invalid month: {month!r}")
        number = int(value)
    elif isinstance(month, int) and not isinstance(month, bool):
        number = month
    else:
        raise ValueError(f"Invalid month: {month!r}")

    if not 1 <= number <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {number}")
    return f"{number:02d}"


def month_label(month: str) -> str:
    """Short month name for a "01".."12" key, "?" if out of range."""
    try:
        return MONTH_NAMES[int(month) - 1]
    except (ValueError, IndexError):
        return "?"


def previous_year(year: str) -> str:
    return str(int(year) - 1)


def get_month_range(year: int, month: int) -> Tuple[str, str]:
    """
    Get the date range for a specific month.

    Args:
        year: Year (e.g., 2026)
        month: Month (1-12)

    Returns:
        Tuple of (start_date, end_date) as "YYYY-MM-DD" strings

    Raises:
        ValueError: If month is not in valid range (1-12)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")

    _, last_day = calendar.monthrange(year, month)

    start = f"{year:04d}-{month:02d}-01"
    end = f"{year:04d}-{month:02d}-{last_day:02d}"

    return start, end


def get_period_range(year: str, month: str) -> Tuple[str, str]:
    """Date range covered by a (year, month-or-"all") selection."""
    if month == ALL_MONTHS:
        return f"{year}-01-01", f"{year}-12-31"
    return get_month_range(int(year), int(month))
