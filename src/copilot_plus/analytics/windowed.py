"""
Month-windowed aggregates recomputed from the transaction index.
"""

from typing import Dict, List, Mapping, Optional, Union

from copilot_plus.config import ALL_MONTHS
from copilot_plus.models.aggregate import AggregateView, TransactionIndex, YearAggregate
from copilot_plus.utils.date_utils import MONTH_KEYS, normalize_month
from copilot_plus.utils.money import round_cents


def get_windowed_aggregate(
    aggregates: Mapping[str, YearAggregate],
    index: TransactionIndex,
    year: str,
    month: Optional[Union[str, int]] = ALL_MONTHS,
) -> AggregateView:
    """
    Aggregate for a year, or for a single month of it.

    For "all" the precomputed YearAggregate is returned as is. For a
    month the totals are rebuilt from the index and rounded once at
    the end, the same way the yearly aggregates are.

    Raises:
        ValueError: If month is not a valid month filter
    """
    month_key = normalize_month(month)
    if month_key == ALL_MONTHS:
        existing = aggregates.get(year)
        return existing if existing is not None else YearAggregate()

    total = 0.0
    count = 0
    categories: Dict[str, float] = {}
    subcategories: Dict[str, Dict[str, float]] = {}

    for parent, subs in index.get(year, {}).items():
        for sub, transactions in subs.items():
            filtered = [txn for txn in transactions if txn.month == month_key]
            if not filtered:
                continue
            amount = sum((txn.amount for txn in filtered), 0.0)
            total += amount
            count += len(filtered)
            categories[parent] = categories.get(parent, 0.0) + amount
            parent_subs = subcategories.setdefault(parent, {})
            parent_subs[sub] = parent_subs.get(sub, 0.0) + amount

    return AggregateView(
        total=round_cents(total),
        transaction_count=count,
        category_totals={c: round_cents(v) for c, v in categories.items()},
        subcategory_totals={
            c: {s: round_cents(v) for s, v in subs.items()}
            for c, subs in subcategories.items()
        },
    )


def available_months(aggregates: Mapping[str, YearAggregate], year: str) -> List[str]:
    """Months of a year that have data, in calendar order."""
    aggregate = aggregates.get(year)
    if aggregate is None:
        return []
    return [m for m in MONTH_KEYS if aggregate.monthly_totals.get(m)]
