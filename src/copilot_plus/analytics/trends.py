"""
Year-over-year trend analysis over full years.

A year counts as "full" once it has data in at least
FULL_YEAR_MIN_MONTHS distinct months, so a current, partial year does
not drag comparisons down.
"""

from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from copilot_plus.config import (
    FALLBACK_YEAR_COLOR,
    FULL_YEAR_MIN_MONTHS,
    MOVER_MIN_BASELINE,
    OVERLAY_YEARS,
    SERIES_MIN_PEAK,
    YEAR_COLORS,
    YOY_BADGE_MIN_BASELINE,
    YOY_TABLE_YEARS,
)
from copilot_plus.core.exceptions import InsufficientHistoryError
from copilot_plus.models.insights import (
    AnnualTotal,
    CategoryMover,
    CategoryTrend,
    MonthlySeries,
    YoYInsights,
    YoYRow,
    YoYTable,
)
from copilot_plus.utils.date_utils import MONTH_KEYS, previous_year
from copilot_plus.utils.money import pct_change, round_cents

if TYPE_CHECKING:
    from copilot_plus.core.model import FinancialModel


class TrendMode(str, Enum):
    YEARLY = "yearly"
    TOTAL = "total"


def full_years(model: "FinancialModel") -> List[str]:
    """Years with enough months of data, oldest first."""
    return [
        year for year in model.years
        if model.aggregates[year].month_count >= FULL_YEAR_MIN_MONTHS
    ]


def _require_history(model: "FinancialModel") -> List[str]:
    years = full_years(model)
    if len(years) < 2:
        raise InsufficientHistoryError(years)
    return years


def get_trend_series(
    model: "FinancialModel", mode: str = TrendMode.YEARLY.value
) -> List[CategoryTrend]:
    """
    Per-category series across full years.

    In "yearly" mode each value is that year's category total and
    change_pct compares the last two years. In "total" mode values are
    a running sum, so the series never decreases.

    Raises:
        ValueError: If mode is not "yearly" or "total"
        InsufficientHistoryError: If fewer than two full years exist
    """
    trend_mode = TrendMode(mode)
    years = _require_history(model)

    series: List[CategoryTrend] = []
    for category in model.category_order:
        values = [model.aggregates[y].category_totals.get(category, 0.0) for y in years]
        if max(values) < SERIES_MIN_PEAK:
            continue

        if trend_mode == TrendMode.TOTAL:
            running = 0.0
            cumulative = []
            for value in values:
                running += value
                cumulative.append(round_cents(running))
            trend = CategoryTrend(
                category=category,
                color=model.get_color(category),
                years=years,
                values=cumulative,
                latest=cumulative[-1],
            )
        else:
            trend = CategoryTrend(
                category=category,
                color=model.get_color(category),
                years=years,
                values=values,
                latest=values[-1],
                change_pct=pct_change(values[-1], values[-2]),
            )
        series.append(trend)
    return series


def get_yoy_insights(model: "FinancialModel") -> YoYInsights:
    """
    Compare the two most recent full years.

    Biggest movers only consider categories whose previous-year total is
    above MOVER_MIN_BASELINE; tiny baselines make percentages explode.
    """
    years = _require_history(model)
    latest, previous = years[-1], years[-2]
    current_agg = model.aggregates[latest]
    previous_agg = model.aggregates[previous]

    increase: Optional[CategoryMover] = None
    decrease: Optional[CategoryMover] = None
    for category in model.category_order:
        cur = current_agg.category_totals.get(category, 0.0)
        prev = previous_agg.category_totals.get(category, 0.0)
        if prev <= MOVER_MIN_BASELINE:
            continue
        mover = CategoryMover(
            category=category,
            pct=(cur - prev) / prev * 100,
            current=cur,
            previous=prev,
        )
        if increase is None or mover.pct > increase.pct:
            increase = mover
        if decrease is None or mover.pct < decrease.pct:
            decrease = mover

    return YoYInsights(
        latest_year=latest,
        previous_year=previous,
        latest_total=current_agg.total,
        previous_total=previous_agg.total,
        total_change_pct=pct_change(current_agg.total, previous_agg.total),
        biggest_increase=increase,
        biggest_decrease=decrease,
    )


def get_yoy_table(model: "FinancialModel") -> YoYTable:
    """Category totals for the most recent full years, with a change badge."""
    years = _require_history(model)
    display_years = years[-YOY_TABLE_YEARS:]
    latest, previous = years[-1], years[-2]

    total_row = YoYRow(
        category="Total",
        values={y: model.aggregates[y].total for y in display_years},
        change_pct=pct_change(model.aggregates[latest].total, model.aggregates[previous].total),
    )

    rows: List[YoYRow] = []
    for category in model.category_order:
        values = {
            y: model.aggregates[y].category_totals.get(category, 0.0) for y in display_years
        }
        if not any(v > 0 for v in values.values()):
            continue
        cur = model.aggregates[latest].category_totals.get(category, 0.0)
        prev = model.aggregates[previous].category_totals.get(category, 0.0)
        change = None
        if prev > YOY_BADGE_MIN_BASELINE and cur > 0:
            change = (cur - prev) / prev * 100
        rows.append(
            YoYRow(
                category=category,
                color=model.get_color(category),
                values=values,
                change_pct=change,
            )
        )

    return YoYTable(
        years=display_years,
        latest_year=latest,
        previous_year=previous,
        total=total_row,
        rows=rows,
    )


def get_annual_totals(model: "FinancialModel") -> List[AnnualTotal]:
    """Yearly totals of full years, each compared with the calendar year before."""
    years = _require_history(model)
    result = []
    for year in years:
        total = model.aggregates[year].total
        prior = model.aggregates.get(previous_year(year))
        result.append(
            AnnualTotal(
                year=year,
                total=total,
                yoy_pct=pct_change(total, prior.total) if prior is not None else None,
            )
        )
    return result


def get_monthly_overlay(model: "FinancialModel") -> List[MonthlySeries]:
    """Twelve monthly totals for each of the most recent full years."""
    years = _require_history(model)
    return [
        MonthlySeries(
            year=year,
            color=YEAR_COLORS.get(year, FALLBACK_YEAR_COLOR),
            values=[model.aggregates[year].monthly_totals.get(m, 0.0) for m in MONTH_KEYS],
        )
        for year in years[-OVERLAY_YEARS:]
    ]
