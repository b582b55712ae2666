"""
End-to-end tests for the MCP server.

Tests the full server protocol including tool functionality.
"""

import json

import pytest

from copilot_plus.server import CopilotPlusServer


@pytest.fixture
def server(sample_csv_path):
    """Create CopilotPlusServer instance with the sample export."""
    return CopilotPlusServer(sample_csv_path)


def call(server: CopilotPlusServer, name: str, **arguments):
    """Call a tool through the server and decode its JSON response."""
    result = server.handle_tool_call(name, arguments)
    return json.loads(result[0].text)


@pytest.mark.e2e
def test_server_initialization(server):
    """Test that server can be initialized."""
    assert server.session is not None
    assert server.tools is not None
    assert server.server is not None


@pytest.mark.e2e
def test_server_export_available(server):
    """Test that server export is available."""
    assert server.session.is_available()


@pytest.mark.e2e
def test_summary_loads_lazily(server):
    """Test that the first tool call loads the configured export."""
    summary = call(server, "get_summary")

    assert server.session.is_loaded()
    assert summary["transaction_count"] == 14
    assert summary["full_years"] == ["2022", "2023"]
    assert summary["default_year"] == "2023"


@pytest.mark.e2e
def test_drilldown_from_flow_graph(server):
    """Test resolving a flow graph node to its transactions."""
    graph = call(server, "get_flow_graph", year="2023")
    groceries = next(n for n in graph["nodes"] if n["name"] == "Groceries")

    result = call(
        server,
        "query_transactions",
        year="2023",
        parent_category=groceries["category"],
        sub_category=groceries["subcategory"],
    )
    assert result["total"] == groceries["value"]
    assert result["count"] == 2


@pytest.mark.e2e
def test_month_window_flow_graph(server):
    """Test the flow graph for a single month."""
    graph = call(server, "get_flow_graph", year="2023", month="09")

    assert graph["month"] == "09"
    assert graph["total"] == 545.25
    assert [n["name"] for n in graph["nodes"]] == [
        "Total Spend",
        "Food",
        "Transport",
        "Groceries",
        "Rideshare",
    ]


@pytest.mark.e2e
def test_trend_tools(server):
    """Test the trend and year-over-year tools on the sample export."""
    series = call(server, "get_trend_series", mode="yearly")
    assert [s["category"] for s in series["series"]] == ["Food", "Housing", "Transport"]

    insights = call(server, "get_yoy_insights")
    assert insights["biggest_increase"]["category"] == "Food"
    assert insights["biggest_decrease"]["category"] == "Housing"

    table = call(server, "get_yoy_table")
    assert table["years"] == ["2022", "2023"]
    assert len(table["monthly_overlay"]) == 2


@pytest.mark.e2e
def test_reload_keeps_previous_model_on_failure(server, tmp_path):
    """Test that a failed load leaves the current model in place."""
    call(server, "get_summary")
    bad = tmp_path / "bad.csv"
    bad.write_text("date,name,amount\n", encoding="utf-8")

    result = server.handle_tool_call("load_export", {"path": str(bad)})
    assert result[0].text == "Error: No data rows found in CSV."

    summary = call(server, "get_summary")
    assert summary["transaction_count"] == 14


@pytest.mark.e2e
def test_reload_replaces_model(server, tmp_path):
    """Test that loading another export swaps the model."""
    other = tmp_path / "other.csv"
    other.write_text(
        "date,name,amount,category,parent category\n"
        "2025-06-01,Airline,300.00,Flights,Travel\n",
        encoding="utf-8",
    )

    summary = call(server, "load_export", path=str(other))
    assert summary["years"] == ["2025"]
    assert summary["source"] == str(other)

    categories = call(server, "get_categories")
    assert [c["name"] for c in categories["categories"]] == ["Travel"]


@pytest.mark.e2e
def test_insufficient_history_reported(tmp_path):
    """Test trend tools on an export with a single year."""
    export = tmp_path / "one_year.csv"
    export.write_text("date,amount\n2025-01-01,10\n2025-02-01,10\n", encoding="utf-8")
    server = CopilotPlusServer(export)

    result = server.handle_tool_call("get_yoy_insights", {})
    assert result[0].text.startswith("Error: Need at least 2 years of data")


@pytest.mark.e2e
def test_tool_response_serialization(server):
    """Test that all tool responses can be serialized to JSON."""
    tools_to_call = [
        ("get_summary", {}),
        ("get_year_aggregate", {"year": "2022"}),
        ("get_windowed_aggregate", {"year": "2022", "month": "04"}),
        ("query_transactions", {"year": "2022"}),
        ("get_categories", {}),
        ("get_flow_graph", {}),
        ("get_trend_series", {"mode": "total"}),
        ("get_yoy_insights", {}),
        ("get_yoy_table", {}),
        ("get_overview", {"year": "2024"}),
    ]

    for name, arguments in tools_to_call:
        result = server.handle_tool_call(name, arguments)
        deserialized = json.loads(result[0].text)
        assert isinstance(deserialized, dict), name
