"""
Single-year overview: headline numbers and category breakdown.
"""

from typing import TYPE_CHECKING, List, Optional

from copilot_plus.config import FULL_YEAR_MIN_MONTHS
from copilot_plus.models.category import CategoryShare, SubcategoryShare
from copilot_plus.models.insights import MonthAmount, YearOverview
from copilot_plus.utils.date_utils import month_label, previous_year
from copilot_plus.utils.money import pct_change, pct_of_total, round_cents

if TYPE_CHECKING:
    from copilot_plus.core.model import FinancialModel


def default_year(model: "FinancialModel") -> Optional[str]:
    """
    Year to open on: the latest one, unless it is still young.

    When there is an earlier year and the latest has fewer than
    FULL_YEAR_MIN_MONTHS months of data, the year before it is used.
    """
    if not model.years:
        return None
    year = model.years[-1]
    if len(model.years) > 1 and model.aggregates[year].month_count < FULL_YEAR_MIN_MONTHS:
        year = model.years[-2]
    return year


def get_overview(model: "FinancialModel", year: str) -> Optional[YearOverview]:
    """Summary of one year, or None if the year has no data."""
    aggregate = model.aggregates.get(year)
    if aggregate is None:
        return None

    months = sorted(aggregate.monthly_totals)
    highest = lowest = None
    if months:
        # First month wins ties, as in calendar order.
        top = max(months, key=lambda m: aggregate.monthly_totals[m])
        bottom = min(months, key=lambda m: aggregate.monthly_totals[m])
        highest = MonthAmount(month=top, label=month_label(top), amount=aggregate.monthly_totals[top])
        lowest = MonthAmount(
            month=bottom, label=month_label(bottom), amount=aggregate.monthly_totals[bottom]
        )

    prior_year = previous_year(year)
    prior = model.aggregates.get(prior_year)
    change_pct = pct_change(aggregate.total, prior.total) if prior is not None else None

    categories: List[CategoryShare] = []
    for category in model.category_order:
        amount = aggregate.category_totals.get(category, 0.0)
        if amount <= 0:
            continue
        subs = aggregate.subcategory_totals.get(category, {})
        categories.append(
            CategoryShare(
                name=category,
                amount=amount,
                pct_of_total=pct_of_total(amount, aggregate.total),
                color=model.get_color(category),
                subcategories=[
                    SubcategoryShare(name=name, amount=subs[name])
                    for name in sorted(subs, key=lambda s: subs[s], reverse=True)
                ],
            )
        )

    return YearOverview(
        year=year,
        total=aggregate.total,
        transaction_count=aggregate.transaction_count,
        months_with_data=len(months),
        monthly_average=round_cents(aggregate.total / len(months)) if months else 0.0,
        highest_month=highest,
        lowest_month=lowest,
        previous_year=prior_year if prior is not None else None,
        change_pct=change_pct,
        categories=categories,
    )
