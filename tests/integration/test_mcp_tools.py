"""
Integration tests for MCP tools with the sample export.
"""

import pytest

from copilot_plus.core.exceptions import InsufficientHistoryError, ModelNotLoadedError
from copilot_plus.core.session import ModelSession
from copilot_plus.tools.tools import CopilotPlusTools, create_tool_schemas


@pytest.fixture
def tools(sample_csv_path):
    """Create CopilotPlusTools instance with the sample export."""
    return CopilotPlusTools(ModelSession(sample_csv_path))


@pytest.mark.integration
def test_get_summary(tools):
    """Test get_summary tool."""
    result = tools.get_summary()

    assert result["years"] == ["2022", "2023", "2024"]
    assert result["full_years"] == ["2022", "2023"]
    assert result["default_year"] == "2023"
    assert result["transaction_count"] == 14
    assert result["category_count"] == 5


@pytest.mark.integration
def test_get_year_aggregate_defaults_to_default_year(tools):
    """Test that omitting the year uses the default year."""
    result = tools.get_year_aggregate()

    assert result["year"] == "2023"
    assert result["total"] == 2435.25
    assert result["monthly_totals"]["09"] == 545.25


@pytest.mark.integration
def test_get_year_aggregate_unknown_year(tools):
    with pytest.raises(ValueError, match="No data for year"):
        tools.get_year_aggregate(year="1999")


@pytest.mark.integration
def test_get_windowed_aggregate_month(tools):
    """Test get_windowed_aggregate for a single month."""
    result = tools.get_windowed_aggregate(year="2023", month="9")

    assert result["month"] == "09"
    assert result["period"] == {"start_date": "2023-09-01", "end_date": "2023-09-30"}
    assert result["total"] == 545.25
    assert result["transaction_count"] == 2
    assert result["available_months"] == ["01", "03", "05", "07", "09"]
    assert "monthly_totals" not in result


@pytest.mark.integration
def test_get_windowed_aggregate_full_year(tools):
    result = tools.get_windowed_aggregate(year="2022")

    assert result["month"] == "all"
    assert result["period"] == {"start_date": "2022-01-01", "end_date": "2022-12-31"}
    assert result["total"] == 2072.5


@pytest.mark.integration
def test_query_transactions_truncates_display_only(tools):
    """Test that total and count cover all matches when the list is truncated."""
    result = tools.query_transactions(year="2023", limit=2)

    assert result["count"] == 6
    assert result["total"] == 2435.25
    assert result["shown"] == 2
    assert result["truncated"] is True
    assert len(result["transactions"]) == 2
    assert result["transactions"][0]["date"] == "2023-09-30"


@pytest.mark.integration
def test_query_transactions_structure(tools):
    """Test transaction fields in query results."""
    result = tools.query_transactions(year="2023", parent_category="Housing", sub_category="Rent")

    assert result["truncated"] is False
    txn = result["transactions"][0]
    assert txn == {
        "date": "2023-03-02",
        "name": "Landlord",
        "amount": 800.0,
        "year": "2023",
        "month": "03",
    }


@pytest.mark.integration
def test_get_categories(tools):
    result = tools.get_categories()

    assert result["count"] == 5
    first = result["categories"][0]
    assert first["name"] == "Food"
    assert first["rank"] == 1
    assert first["color"].startswith("#")


@pytest.mark.integration
def test_get_flow_graph(tools):
    """Test flow graph nodes and links are serialized with their kinds."""
    result = tools.get_flow_graph(year="2023")

    assert result["nodes"][0]["kind"] == "root"
    assert result["nodes"][1]["kind"] == "parent"
    assert result["links"][-1]["kind"] == "sub"
    root_links = [l for l in result["links"] if l["source"] == 0]
    assert abs(sum(l["value"] for l in root_links) - result["total"]) < 0.01


@pytest.mark.integration
def test_get_trend_series_total_mode(tools):
    result = tools.get_trend_series(mode="total")

    food = next(s for s in result["series"] if s["category"] == "Food")
    assert food["values"] == [1000.0, 2500.0]


@pytest.mark.integration
def test_get_yoy_insights(tools):
    result = tools.get_yoy_insights()

    assert result["latest_year"] == "2023"
    assert result["biggest_increase"]["pct"] == pytest.approx(50.0)
    assert [a["year"] for a in result["annual_totals"]] == ["2022", "2023"]


@pytest.mark.integration
def test_get_yoy_table(tools):
    result = tools.get_yoy_table()

    assert result["total"]["values"] == {"2022": 2072.5, "2023": 2435.25}
    overlay = {s["year"]: s["values"] for s in result["monthly_overlay"]}
    assert overlay["2022"][0] == 1400.0
    assert overlay["2023"][8] == 545.25


@pytest.mark.integration
def test_get_overview(tools):
    result = tools.get_overview(year="2022")

    assert result["total"] == 2072.5
    assert result["months_with_data"] == 4
    assert result["previous_year"] is None
    assert result["change_pct"] is None


@pytest.mark.integration
def test_load_export_replaces_model(tools, tmp_path):
    """Test load_export switches the session to a new export."""
    export = tmp_path / "export.csv"
    export.write_text("date,amount\n2025-01-01,10\n", encoding="utf-8")

    result = tools.load_export(str(export))

    assert result["years"] == ["2025"]
    assert result["default_year"] == "2025"
    with pytest.raises(InsufficientHistoryError):
        tools.get_trend_series()


@pytest.mark.integration
def test_tools_without_export():
    """Test tools before any export is loaded."""
    tools = CopilotPlusTools(ModelSession())
    with pytest.raises(ModelNotLoadedError):
        tools.get_summary()


@pytest.mark.integration
def test_create_tool_schemas():
    """Test that tool schemas are properly defined."""
    schemas = create_tool_schemas()

    assert len(schemas) == 11
    for schema in schemas:
        assert "name" in schema
        assert "description" in schema
        assert "inputSchema" in schema
        assert schema["inputSchema"]["type"] == "object"

    load = next(s for s in schemas if s["name"] == "load_export")
    assert load["inputSchema"]["required"] == ["path"]
