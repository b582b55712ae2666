"""
Drill-down query result model.
"""

from typing import List

from pydantic import BaseModel, Field

from copilot_plus.models.transaction import Transaction


class TransactionQueryResult(BaseModel):
    """
    Transactions matching a drill-down query, newest first.

    ``total`` and ``count`` always describe the full filtered set, even
    when a caller only displays a slice of ``transactions``.
    """

    model_config = {"frozen": True}

    transactions: List[Transaction] = Field(default_factory=list)
    total: float = 0.0
    count: int = 0
