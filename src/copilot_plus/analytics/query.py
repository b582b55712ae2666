"""
Drill-down transaction queries against the transaction index.
"""

from typing import List, Optional, Union

from copilot_plus.config import ALL_MONTHS
from copilot_plus.models.aggregate import TransactionIndex
from copilot_plus.models.query import TransactionQueryResult
from copilot_plus.models.transaction import Transaction, sort_newest_first
from copilot_plus.utils.date_utils import normalize_month
from copilot_plus.utils.money import round_cents


def _resolve_bucket(
    index: TransactionIndex,
    year: str,
    parent_category: Optional[str],
    sub_category: Optional[str],
) -> List[Transaction]:
    year_index = index.get(year, {})

    if not parent_category and not sub_category:
        return [txn for subs in year_index.values() for txns in subs.values() for txn in txns]
    if parent_category and sub_category:
        return list(year_index.get(parent_category, {}).get(sub_category, ()))
    if parent_category:
        return [txn for txns in year_index.get(parent_category, {}).values() for txn in txns]
    # A subcategory name alone is ambiguous across parents.
    return []


def query_transactions(
    index: TransactionIndex,
    year: str,
    parent_category: Optional[str] = None,
    sub_category: Optional[str] = None,
    month: Optional[Union[str, int]] = None,
) -> TransactionQueryResult:
    """
    Get the transactions behind a year, category or subcategory.

    Args:
        index: Transaction index of the loaded model
        year: Four-digit year
        parent_category: Limit to this parent category
        sub_category: Limit to this subcategory (needs parent_category)
        month: Optional month filter ("01".."12", 1-12 or "all")

    Returns:
        TransactionQueryResult sorted by date descending

    Raises:
        ValueError: If month is not a valid month filter
    """
    month_key = normalize_month(month)
    transactions = _resolve_bucket(index, year, parent_category, sub_category)

    if month_key != ALL_MONTHS:
        transactions = [txn for txn in transactions if txn.month == month_key]

    # Buckets are sorted individually; flattening interleaves them.
    transactions = sort_newest_first(transactions)

    return TransactionQueryResult(
        transactions=transactions,
        total=round_cents(sum((txn.amount for txn in transactions), 0.0)),
        count=len(transactions),
    )
