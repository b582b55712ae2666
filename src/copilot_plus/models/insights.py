"""
Trend, year-over-year and overview models.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from copilot_plus.models.category import CategoryShare


class CategoryTrend(BaseModel):
    """Per-category series across full years."""

    category: str
    color: str
    years: List[str]
    values: List[float]
    latest: float
    change_pct: Optional[float] = None  # None when undefined (no baseline)


class CategoryMover(BaseModel):
    """A category's change between the two most recent full years."""

    category: str
    pct: float
    current: float
    previous: float


class YoYInsights(BaseModel):
    """Headline comparison of the two most recent full years."""

    latest_year: str
    previous_year: str
    latest_total: float
    previous_total: float
    total_change_pct: Optional[float] = None
    biggest_increase: Optional[CategoryMover] = None
    biggest_decrease: Optional[CategoryMover] = None


class YoYRow(BaseModel):
    """One row of the year-over-year table. ``change_pct`` None means n/a."""

    category: str
    color: Optional[str] = None
    values: Dict[str, float]
    change_pct: Optional[float] = None


class YoYTable(BaseModel):
    years: List[str]
    latest_year: str
    previous_year: str
    total: YoYRow
    rows: List[YoYRow] = Field(default_factory=list)


class AnnualTotal(BaseModel):
    year: str
    total: float
    yoy_pct: Optional[float] = None


class MonthlySeries(BaseModel):
    """Twelve monthly totals for one year, January first."""

    year: str
    color: str
    values: List[float]


class MonthAmount(BaseModel):
    month: str
    label: str
    amount: float


class YearOverview(BaseModel):
    """Summary of a single year."""

    year: str
    total: float
    transaction_count: int
    months_with_data: int
    monthly_average: float
    highest_month: Optional[MonthAmount] = None
    lowest_month: Optional[MonthAmount] = None
    previous_year: Optional[str] = None
    change_pct: Optional[float] = None
    categories: List[CategoryShare] = Field(default_factory=list)
