"""
MCP tool definitions for Copilot Plus.

Exposes the loaded financial model through the Model Context Protocol.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from copilot_plus.config import ALL_MONTHS, DEFAULT_DISPLAY_LIMIT
from copilot_plus.core.session import ModelSession
from copilot_plus.utils.date_utils import get_period_range, normalize_month

MonthArg = Optional[Union[str, int]]


class CopilotPlusTools:
    """Collection of MCP tools for querying a loaded Copilot Money export."""

    def __init__(self, session: ModelSession):
        """
        Initialize tools with a model session.

        Args:
            session: ModelSession holding the current model
        """
        self.session = session

    def _resolve_year(self, year: Optional[str]) -> str:
        """Use the model's default year when none is given."""
        if year:
            return str(year)
        return self.session.model.default_year() or ""

    def load_export(self, path: str) -> Dict[str, Any]:
        """
        Load a Copilot Money CSV export, replacing the current model.

        Args:
            path: Path to the CSV export

        Returns:
            Dict summarizing the loaded model
        """
        self.session.load_file(Path(path).expanduser())
        return self.get_summary()

    def get_summary(self) -> Dict[str, Any]:
        """
        Get an overview of the loaded data.

        Returns:
            Dict with years, full years, transaction count and categories
        """
        model = self.session.model
        return {
            "source": self.session.source,
            "years": list(model.years),
            "full_years": model.full_years(),
            "default_year": model.default_year(),
            "transaction_count": model.transaction_count,
            "category_count": len(model.category_order),
        }

    def get_year_aggregate(self, year: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the precomputed aggregate for a year.

        Args:
            year: Four-digit year (default: the model's default year)

        Returns:
            Dict with the year's aggregate

        Raises:
            ValueError: If the year has no data
        """
        year = self._resolve_year(year)
        aggregate = self.session.model.get_year_aggregate(year)
        if aggregate is None:
            raise ValueError(f"No data for year: {year}")
        return {"year": year, **aggregate.model_dump(mode="json")}

    def get_windowed_aggregate(
        self, year: Optional[str] = None, month: MonthArg = ALL_MONTHS
    ) -> Dict[str, Any]:
        """
        Get the aggregate for a year or for one month of it.

        Args:
            year: Four-digit year (default: the model's default year)
            month: "01".."12", 1-12, or "all" for the whole year

        Returns:
            Dict with the period and its aggregate
        """
        year = self._resolve_year(year)
        month_key = normalize_month(month)
        model = self.session.model
        view = model.get_windowed_aggregate(year, month_key)
        start_date, end_date = get_period_range(year, month_key)
        return {
            "year": year,
            "month": month_key,
            "period": {"start_date": start_date, "end_date": end_date},
            "available_months": model.available_months(year),
            **view.model_dump(mode="json"),
        }

    def query_transactions(
        self,
        year: Optional[str] = None,
        parent_category: Optional[str] = None,
        sub_category: Optional[str] = None,
        month: MonthArg = None,
        limit: int = DEFAULT_DISPLAY_LIMIT,
    ) -> Dict[str, Any]:
        """
        Get the transactions behind a year, category or subcategory.

        Args:
            year: Four-digit year (default: the model's default year)
            parent_category: Limit to this parent category
            sub_category: Limit to this subcategory (requires parent_category)
            month: Optional month filter
            limit: Maximum number of transactions to list (default: 300)

        Returns:
            Dict with total and count of all matches and the listed slice
        """
        year = self._resolve_year(year)
        result = self.session.model.query_transactions(
            year, parent_category, sub_category, month
        )
        shown = result.transactions[: max(limit, 0)]
        return {
            "year": year,
            "parent_category": parent_category,
            "sub_category": sub_category,
            "month": normalize_month(month),
            "total": result.total,
            "count": result.count,
            "shown": len(shown),
            "truncated": len(shown) < result.count,
            "transactions": [txn.model_dump(mode="json") for txn in shown],
        }

    def get_categories(self) -> Dict[str, Any]:
        """
        Get parent categories in global order with their colours.

        Returns:
            Dict with ordered categories
        """
        model = self.session.model
        return {
            "count": len(model.category_order),
            "categories": [
                {"name": category, "rank": rank, "color": model.get_color(category)}
                for rank, category in enumerate(model.get_category_order(), start=1)
            ],
        }

    def get_flow_graph(self, year: Optional[str] = None, month: MonthArg = ALL_MONTHS) -> Dict[str, Any]:
        """
        Get the Total Spend -> category -> subcategory flow graph.

        Args:
            year: Four-digit year (default: the model's default year)
            month: "01".."12", 1-12, or "all"

        Returns:
            Dict with nodes and links
        """
        year = self._resolve_year(year)
        model = self.session.model
        graph = model.build_flow_graph(model.get_windowed_aggregate(year, month))
        return {"year": year, "month": normalize_month(month), **graph.model_dump(mode="json")}

    def get_trend_series(self, mode: str = "yearly") -> Dict[str, Any]:
        """
        Get per-category series across full years.

        Args:
            mode: "yearly" for per-year totals, "total" for running totals

        Returns:
            Dict with the series
        """
        series = self.session.model.get_trend_series(mode)
        return {
            "mode": mode,
            "count": len(series),
            "series": [trend.model_dump(mode="json") for trend in series],
        }

    def get_yoy_insights(self) -> Dict[str, Any]:
        """Get the latest-vs-previous full year comparison and biggest movers."""
        model = self.session.model
        return {
            **model.get_yoy_insights().model_dump(mode="json"),
            "annual_totals": [a.model_dump(mode="json") for a in model.get_annual_totals()],
        }

    def get_yoy_table(self) -> Dict[str, Any]:
        """Get category totals for recent full years with change badges."""
        model = self.session.model
        return {
            **model.get_yoy_table().model_dump(mode="json"),
            "monthly_overlay": [s.model_dump(mode="json") for s in model.get_monthly_overlay()],
        }

    def get_overview(self, year: Optional[str] = None) -> Dict[str, Any]:
        """
        Get headline numbers and the category breakdown for a year.

        Raises:
            ValueError: If the year has no data
        """
        year = self._resolve_year(year)
        overview = self.session.model.get_overview(year)
        if overview is None:
            raise ValueError(f"No data for year: {year}")
        return overview.model_dump(mode="json")


_YEAR_PROPERTY = {
    "type": "string",
    "description": "Four-digit year (default: latest year with enough data)",
    "pattern": r"^\d{4}$",
}

_MONTH_PROPERTY = {
    "type": "string",
    "description": 'Month "01".."12", or "all" for the full year',
}


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema definitions
    """
    return [
        {
            "name": "load_export",
            "description": (
                "Load a Copilot Money CSV export and rebuild the spending model. "
                "The previous model stays active if loading fails."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the CSV export",
                    },
                },
                "required": ["path"],
            },
        },
        {
            "name": "get_summary",
            "description": "Get the years, transaction count and categories of the loaded export.",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "get_year_aggregate",
            "description": (
                "Get yearly spending totals: overall, by month, by category "
                "and by subcategory."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"year": _YEAR_PROPERTY},
            },
        },
        {
            "name": "get_windowed_aggregate",
            "description": (
                "Get spending totals by category and subcategory for a full "
                "year or a single month."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"year": _YEAR_PROPERTY, "month": _MONTH_PROPERTY},
            },
        },
        {
            "name": "query_transactions",
            "description": (
                "List the transactions behind a year, parent category or "
                "subcategory, optionally for one month. Total and count cover "
                "all matches even when the list is truncated."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "year": _YEAR_PROPERTY,
                    "parent_category": {
                        "type": "string",
                        "description": "Parent category name",
                    },
                    "sub_category": {
                        "type": "string",
                        "description": "Subcategory name (requires parent_category)",
                    },
                    "month": _MONTH_PROPERTY,
                    "limit": {
                        "type": "integer",
                        "description": "Maximum number of transactions to list (default: 300)",
                        "default": DEFAULT_DISPLAY_LIMIT,
                    },
                },
            },
        },
        {
            "name": "get_categories",
            "description": "Get parent categories ranked by all-time spending, with their colours.",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "get_flow_graph",
            "description": (
                "Get a Sankey flow graph (Total Spend -> category -> "
                "subcategory) for a year or month."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"year": _YEAR_PROPERTY, "month": _MONTH_PROPERTY},
            },
        },
        {
            "name": "get_trend_series",
            "description": (
                "Get per-category spending series across full years (years "
                "with at least 4 months of data)."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "mode": {
                        "type": "string",
                        "enum": ["yearly", "total"],
                        "description": "yearly: per-year totals; total: running totals",
                        "default": "yearly",
                    },
                },
            },
        },
        {
            "name": "get_yoy_insights",
            "description": (
                "Compare the two most recent full years: total change and the "
                "categories with the biggest increase and decrease."
            ),
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "get_yoy_table",
            "description": (
                "Get category totals for up to the 5 most recent full years "
                "with year-over-year change, plus monthly totals per year."
            ),
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "get_overview",
            "description": (
                "Get a year's total, monthly average, highest and lowest "
                "month, change vs the previous year and category breakdown."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"year": _YEAR_PROPERTY},
            },
        },
    ]
