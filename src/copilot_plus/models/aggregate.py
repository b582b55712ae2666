"""
Aggregate models for yearly and month-windowed spending views.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, Field

from copilot_plus.models.transaction import Transaction

# year -> parent category -> subcategory -> transactions, newest first
TransactionIndex = Dict[str, Dict[str, Dict[str, Tuple[Transaction, ...]]]]


class AggregateView(BaseModel):
    """
    Spending totals for one period, split by category and subcategory.

    Produced by month-windowed recomputation. Every leaf is rounded to
    cents once, after all amounts have been added.
    """

    model_config = {"frozen": True}

    total: float = 0.0
    transaction_count: int = 0
    category_totals: Dict[str, float] = Field(default_factory=dict)
    subcategory_totals: Dict[str, Dict[str, float]] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0


class YearAggregate(AggregateView):
    """
    Spending totals for a calendar year.

    ``monthly_totals`` is keyed "01".."12" and only holds months that
    have at least one transaction.
    """

    monthly_totals: Dict[str, float] = Field(default_factory=dict)

    @property
    def month_count(self) -> int:
        """Number of distinct months with data."""
        return len(self.monthly_totals)
