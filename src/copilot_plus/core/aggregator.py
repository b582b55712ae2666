"""
Hierarchical aggregation of validated transactions.

One pass builds per-year totals (overall, monthly, category and
subcategory) and the transaction index. Sums are accumulated unrounded
and rounded to cents once at the end so that thousands of small
additions do not compound float error.
"""

from collections import defaultdict
from typing import DefaultDict, Dict, Iterable, List, Mapping, Tuple

from copilot_plus.config import PALETTE
from copilot_plus.core.normalizer import NormalizedRow
from copilot_plus.models.aggregate import TransactionIndex, YearAggregate
from copilot_plus.models.transaction import Transaction, sort_newest_first
from copilot_plus.utils.money import round_cents


class _YearAccumulator:
    """Mutable running totals for one year; discarded after finalize()."""

    def __init__(self) -> None:
        self.total = 0.0
        self.transaction_count = 0
        self.monthly: Dict[str, float] = {}
        self.categories: Dict[str, float] = {}
        self.subcategories: Dict[str, Dict[str, float]] = {}

    def add(self, month: str, parent: str, sub: str, amount: float) -> None:
        self.total += amount
        self.transaction_count += 1
        self.monthly[month] = self.monthly.get(month, 0.0) + amount
        self.categories[parent] = self.categories.get(parent, 0.0) + amount
        subs = self.subcategories.setdefault(parent, {})
        subs[sub] = subs.get(sub, 0.0) + amount

    def finalize(self) -> YearAggregate:
        return YearAggregate(
            total=round_cents(self.total),
            transaction_count=self.transaction_count,
            monthly_totals={m: round_cents(v) for m, v in self.monthly.items()},
            category_totals={c: round_cents(v) for c, v in self.categories.items()},
            subcategory_totals={
                c: {s: round_cents(v) for s, v in subs.items()}
                for c, subs in self.subcategories.items()
            },
        )


def build_aggregates(
    rows: Iterable[NormalizedRow],
) -> Tuple[Dict[str, YearAggregate], TransactionIndex]:
    """
    Build year aggregates and the transaction index in a single pass.

    Args:
        rows: Validated rows in input order

    Returns:
        Tuple of (year -> YearAggregate, TransactionIndex)
    """
    accumulators: Dict[str, _YearAccumulator] = {}
    buckets: Dict[str, Dict[str, DefaultDict[str, List[Transaction]]]] = {}

    for row in rows:
        year = row.year
        if year not in accumulators:
            accumulators[year] = _YearAccumulator()
            buckets[year] = {}

        accumulators[year].add(row.month, row.parent_category, row.sub_category, row.raw_amount)

        by_parent = buckets[year].setdefault(row.parent_category, defaultdict(list))
        by_parent[row.sub_category].append(row.transaction)

    aggregates = {year: acc.finalize() for year, acc in accumulators.items()}
    index: TransactionIndex = {
        year: {
            parent: {sub: tuple(sort_newest_first(txns)) for sub, txns in subs.items()}
            for parent, subs in parents.items()
        }
        for year, parents in buckets.items()
    }
    return aggregates, index


def rank_categories(aggregates: Mapping[str, YearAggregate]) -> List[str]:
    """
    Order parent categories by their all-years total, largest first.

    Years are visited chronologically; ties keep the order in which
    categories were first seen.
    """
    totals: Dict[str, float] = {}
    for year in sorted(aggregates):
        for category, amount in aggregates[year].category_totals.items():
            totals[category] = totals.get(category, 0.0) + amount
    return sorted(totals, key=lambda c: totals[c], reverse=True)


def assign_colors(category_order: Iterable[str]) -> Dict[str, str]:
    """Colour each category by its rank, cycling through the palette."""
    return {
        category: PALETTE[i % len(PALETTE)]
        for i, category in enumerate(category_order)
    }
