"""
Read-only financial model built from one export.

Provides the query surface used by the MCP tools: yearly and windowed
aggregates, drill-down queries, category order and colours, flow graphs
and trends.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Union

from copilot_plus.analytics import overview, trends
from copilot_plus.analytics.flow_graph import build_flow_graph
from copilot_plus.analytics.query import query_transactions
from copilot_plus.analytics.windowed import available_months, get_windowed_aggregate
from copilot_plus.config import ALL_MONTHS, FALLBACK_COLOR
from copilot_plus.models.aggregate import AggregateView, TransactionIndex, YearAggregate
from copilot_plus.models.flow import FlowGraph
from copilot_plus.models.insights import (
    AnnualTotal,
    CategoryTrend,
    MonthlySeries,
    YearOverview,
    YoYInsights,
    YoYTable,
)
from copilot_plus.models.query import TransactionQueryResult

class FinancialModel:
    """
    Immutable spending model for one loaded export.

    Category order and colours are computed once, at build time, and
    stay fixed for the lifetime of the model. Loading another export
    produces a new FinancialModel rather than changing this one.
    """

    def __init__(
        self,
        aggregates: Mapping[str, YearAggregate],
        index: TransactionIndex,
        category_order: Sequence[str],
        colors: Mapping[str, str],
    ):
        """
        Initialize the model.

        Args:
            aggregates: year -> YearAggregate
            index: year -> parent -> sub -> transactions (newest first)
            category_order: Parent categories, largest all-time total first
            colors: Category -> colour assignment
        """
        self._aggregates: Mapping[str, YearAggregate] = MappingProxyType(dict(aggregates))
        self._index = index
        self._category_order = tuple(category_order)
        self._colors: Mapping[str, str] = MappingProxyType(dict(colors))
        self._years = tuple(sorted(self._aggregates))

    @property
    def years(self) -> Sequence[str]:
        """Years with data, oldest first."""
        return self._years

    @property
    def aggregates(self) -> Mapping[str, YearAggregate]:
        return self._aggregates

    @property
    def index(self) -> TransactionIndex:
        return self._index

    @property
    def category_order(self) -> Sequence[str]:
        return self._category_order

    @property
    def transaction_count(self) -> int:
        return sum(agg.transaction_count for agg in self._aggregates.values())

    def get_year_aggregate(self, year: str) -> Optional[YearAggregate]:
        return self._aggregates.get(year)

    def get_windowed_aggregate(
        self, year: str, month: Optional[Union[str, int]] = ALL_MONTHS
    ) -> AggregateView:
        """Year aggregate for "all", otherwise a single month recomputed."""
        return get_windowed_aggregate(self._aggregates, self._index, year, month)

    def available_months(self, year: str) -> List[str]:
        return available_months(self._aggregates, year)

    def query_transactions(
        self,
        year: str,
        parent_category: Optional[str] = None,
        sub_category: Optional[str] = None,
        month: Optional[Union[str, int]] = None,
    ) -> TransactionQueryResult:
        return query_transactions(self._index, year, parent_category, sub_category, month)

    def get_category_order(self) -> List[str]:
        return list(self._category_order)

    def get_color(self, category: str) -> str:
        return self._colors.get(category, FALLBACK_COLOR)

    def get_colors(self) -> Dict[str, str]:
        return dict(self._colors)

    def build_flow_graph(self, view: AggregateView) -> FlowGraph:
        return build_flow_graph(view, self._category_order, self._colors)

    def get_trend_series(self, mode: str = "yearly") -> List[CategoryTrend]:
        return trends.get_trend_series(self, mode)

    def get_yoy_insights(self) -> YoYInsights:
        return trends.get_yoy_insights(self)

    def get_yoy_table(self) -> YoYTable:
        return trends.get_yoy_table(self)

    def get_annual_totals(self) -> List[AnnualTotal]:
        return trends.get_annual_totals(self)

    def get_monthly_overlay(self) -> List[MonthlySeries]:
        return trends.get_monthly_overlay(self)

    def full_years(self) -> List[str]:
        return trends.full_years(self)

    def get_overview(self, year: str) -> Optional[YearOverview]:
        return overview.get_overview(self, year)

    def default_year(self) -> Optional[str]:
        return overview.default_year(self)
