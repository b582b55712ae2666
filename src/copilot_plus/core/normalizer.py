"""
Row normalization and validation.

Rows that fail validation are dropped without a per-row report: real
exports routinely contain pending, refunded or half-filled rows.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from copilot_plus.config import OTHER_SUBCATEGORY, UNCATEGORIZED, UNKNOWN_MERCHANT
from copilot_plus.core.parser import ColumnMap
from copilot_plus.models.transaction import Transaction

_YEAR_PREFIX_RE = re.compile(r"^[0-9]{4}")
_LEADING_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class NormalizedRow:
    """A validated transaction plus its category path."""

    transaction: Transaction
    parent_category: str
    sub_category: str
    raw_amount: float  # unrounded, for aggregation

    @property
    def year(self) -> str:
        return self.transaction.year

    @property
    def month(self) -> str:
        return self.transaction.month


def parse_amount(value: Optional[str]) -> Optional[float]:
    """
    Read the leading numeric literal of an amount field.

    Trailing text is ignored ("12.50 USD" -> 12.5); a field that does
    not start with a number yields None.
    """
    if not value:
        return None
    match = _LEADING_NUMBER_RE.match(value)
    if not match:
        return None
    try:
        amount = float(match.group(0))
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None


def _field(row: Dict[str, str], header: Optional[str]) -> str:
    if header is None:
        return ""
    return row.get(header) or ""


def normalize_row(row: Dict[str, str], columns: ColumnMap) -> Optional[NormalizedRow]:
    """
    Validate one raw row.

    Returns:
        NormalizedRow, or None if the row is dropped
    """
    date = _field(row, columns.date).strip()
    if not date or not _YEAR_PREFIX_RE.match(date):
        return None

    amount = parse_amount(_field(row, columns.amount))
    if amount is None or amount <= 0:
        return None

    if _field(row, columns.excluded).strip().lower() == "true":
        return None

    name = _field(row, columns.name).strip() or UNKNOWN_MERCHANT
    parent_category = _field(row, columns.parent_category).strip() or UNCATEGORIZED
    sub_category = _field(row, columns.category).strip() or OTHER_SUBCATEGORY

    return NormalizedRow(
        transaction=Transaction(date=date, name=name, amount=amount),
        parent_category=parent_category,
        sub_category=sub_category,
        raw_amount=amount,
    )


def normalize_rows(rows: Iterable[Dict[str, str]], columns: ColumnMap) -> Iterator[NormalizedRow]:
    """Yield the rows that survive validation, in input order."""
    for row in rows:
        normalized = normalize_row(row, columns)
        if normalized is not None:
            yield normalized
