"""
Unit tests for the flow graph builder.
"""

import pytest

from copilot_plus.analytics.flow_graph import build_flow_graph, neighbors
from copilot_plus.config import FALLBACK_COLOR, ROOT_COLOR, ROOT_NODE_NAME
from copilot_plus.models.aggregate import AggregateView
from copilot_plus.models.flow import NodeKind

VIEW = AggregateView(
    total=1560.0,
    transaction_count=5,
    category_totals={"Food": 500.0, "Housing": 1000.0, "Travel": 60.0},
    subcategory_totals={
        "Food": {"Restaurants": 150.0, "Groceries": 350.0},
        "Housing": {"Rent": 1000.0},
        "Travel": {"Flights": 60.0},
    },
)
ORDER = ["Housing", "Food"]
COLORS = {"Housing": "#111111", "Food": "#222222"}


@pytest.fixture
def graph():
    return build_flow_graph(VIEW, ORDER, COLORS)


@pytest.mark.unit
def test_root_node(graph) -> None:
    """Test that node 0 is the Total Spend root."""
    root = graph.nodes[0]
    assert root.index == 0
    assert root.name == ROOT_NODE_NAME
    assert root.kind == NodeKind.ROOT
    assert root.value == 1560.0
    assert root.color == ROOT_COLOR
    assert graph.total == 1560.0


@pytest.mark.unit
def test_parents_follow_category_order(graph) -> None:
    """Test parent order; categories missing from the order go last."""
    parents = [n for n in graph.nodes if n.kind == NodeKind.PARENT]
    assert [p.name for p in parents] == ["Housing", "Food", "Travel"]
    assert [p.index for p in parents] == [1, 2, 3]
    assert parents[2].color == FALLBACK_COLOR


@pytest.mark.unit
def test_subcategories_largest_first(graph) -> None:
    subs = [n for n in graph.nodes if n.kind == NodeKind.SUB]
    assert [(s.category, s.name) for s in subs] == [
        ("Housing", "Rent"),
        ("Food", "Groceries"),
        ("Food", "Restaurants"),
        ("Travel", "Flights"),
    ]
    assert subs[1].color == COLORS["Food"]


@pytest.mark.unit
def test_links_carry_values_and_metadata(graph) -> None:
    """Test root->parent and parent->sub links."""
    assert len(graph.links) == 7
    root_links = [l for l in graph.links if l.source == 0]
    assert [(l.target, l.value) for l in root_links] == [(1, 1000.0), (2, 500.0), (3, 60.0)]

    groceries = graph.nodes[5]
    link = next(l for l in graph.links if l.target == groceries.index)
    assert link.source == 2
    assert link.value == 350.0
    assert link.kind == NodeKind.SUB
    assert link.drilldown() == ("Food", "Groceries")


@pytest.mark.unit
def test_node_drilldown(graph) -> None:
    """Test that every node resolves to drill-down query arguments."""
    assert graph.nodes[0].drilldown() == (None, None)
    assert graph.nodes[2].drilldown() == ("Food", None)
    assert graph.nodes[5].drilldown() == ("Food", "Groceries")


@pytest.mark.unit
def test_non_positive_amounts_are_skipped() -> None:
    view = AggregateView(
        total=10.0,
        category_totals={"Food": 10.0, "Empty": 0.0},
        subcategory_totals={"Food": {"Groceries": 10.0, "Zero": 0.0}, "Empty": {"X": 0.0}},
    )
    graph = build_flow_graph(view, ["Empty", "Food"], {})
    assert [n.name for n in graph.nodes] == [ROOT_NODE_NAME, "Food", "Groceries"]


@pytest.mark.unit
def test_empty_view_has_only_root() -> None:
    graph = build_flow_graph(AggregateView(), ORDER, COLORS)
    assert len(graph.nodes) == 1
    assert graph.links == []


class TestNeighbors:
    """Tests for hover highlighting neighbour sets."""

    @pytest.mark.unit
    def test_root_neighbors(self, graph) -> None:
        assert neighbors(graph, 0) == {0, 1, 2, 3}

    @pytest.mark.unit
    def test_parent_neighbors(self, graph) -> None:
        """Test a parent highlights itself, the root and its children."""
        assert neighbors(graph, 2) == {0, 2, 5, 6}

    @pytest.mark.unit
    def test_sub_neighbors(self, graph) -> None:
        """Test a subcategory highlights itself, its parent and the root."""
        assert neighbors(graph, 7) == {0, 3, 7}

    @pytest.mark.unit
    def test_unknown_index(self, graph) -> None:
        assert neighbors(graph, 99) == set()
