"""
Pydantic models for Copilot Plus data structures.
"""

from copilot_plus.models.aggregate import AggregateView, YearAggregate
from copilot_plus.models.category import CategoryShare, SubcategoryShare
from copilot_plus.models.flow import FlowGraph, FlowLink, FlowNode, NodeKind
from copilot_plus.models.insights import (
    AnnualTotal,
    CategoryMover,
    CategoryTrend,
    MonthAmount,
    MonthlySeries,
    YearOverview,
    YoYInsights,
    YoYRow,
    YoYTable,
)
from copilot_plus.models.query import TransactionQueryResult
from copilot_plus.models.transaction import Transaction
from copilot_plus.models.view_state import ViewState

__all__ = [
    "Transaction",
    "AggregateView",
    "YearAggregate",
    "CategoryShare",
    "SubcategoryShare",
    "FlowGraph",
    "FlowLink",
    "FlowNode",
    "NodeKind",
    "AnnualTotal",
    "CategoryMover",
    "CategoryTrend",
    "MonthAmount",
    "MonthlySeries",
    "YearOverview",
    "YoYInsights",
    "YoYRow",
    "YoYTable",
    "TransactionQueryResult",
    "ViewState",
]
