"""
Derived, read-only views over a loaded financial model.
"""

from copilot_plus.analytics.flow_graph import build_flow_graph, neighbors
from copilot_plus.analytics.query import query_transactions
from copilot_plus.analytics.windowed import available_months, get_windowed_aggregate

__all__ = [
    "available_months",
    "build_flow_graph",
    "get_windowed_aggregate",
    "neighbors",
    "query_transactions",
]
