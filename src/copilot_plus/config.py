"""
Copilot Plus configuration: constants, palette, thresholds.
"""

import os
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
_default_csv = os.environ.get("COPILOT_PLUS_CSV")
DEFAULT_CSV_PATH: Optional[Path] = Path(_default_csv) if _default_csv else None

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
MAX_PARSE_ERRORS = 3

UNKNOWN_MERCHANT = "Unknown"
UNCATEGORIZED = "Uncategorized"
OTHER_SUBCATEGORY = "Other"

# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------
ALL_MONTHS = "all"
MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
PALETTE = [
    "#b08d57", "#7ab08d", "#8b7ec8", "#5e9cc7", "#c7855e",
    "#6b8fa3", "#c75e8a", "#8ec75e", "#a39e93", "#c7b95e",
    "#5ec7c1", "#c75e5e", "#5e7ec7", "#c7a85e", "#8b57b0",
]
FALLBACK_COLOR = "#9c9488"
ROOT_COLOR = "#e07a3a"

YEAR_COLORS = {
    "2019": "#d4c5a9", "2020": "#c7b09a", "2021": "#a3c4a9", "2022": "#8bb0c7",
    "2023": "#a48bc7", "2024": "#c7a08b", "2025": "#e07a3a", "2026": "#d15656",
}
FALLBACK_YEAR_COLOR = "#999999"

# ---------------------------------------------------------------------------
# Trend thresholds (currency units)
# ---------------------------------------------------------------------------
FULL_YEAR_MIN_MONTHS = 4
MOVER_MIN_BASELINE = 500.0      # biggest-mover candidates need a prior year above this
YOY_BADGE_MIN_BASELINE = 100.0  # YoY table percentage needs a prior year above this
SERIES_MIN_PEAK = 100.0         # categories that never reach this are left out of trend series
YOY_TABLE_YEARS = 5
OVERLAY_YEARS = 4

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
DEFAULT_DISPLAY_LIMIT = 300
ROOT_NODE_NAME = "Total Spend"
