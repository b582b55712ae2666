"""
Flow graph construction: Total Spend -> categories -> subcategories.
"""

from typing import Dict, List, Mapping, Sequence, Set

from copilot_plus.config import FALLBACK_COLOR, ROOT_COLOR, ROOT_NODE_NAME
from copilot_plus.models.aggregate import AggregateView
from copilot_plus.models.flow import FlowGraph, FlowLink, FlowNode, NodeKind


def _ordered_categories(view: AggregateView, category_order: Sequence[str]) -> List[str]:
    """Positive categories in global order; unknown ones last, largest first."""
    totals = view.category_totals
    ordered = [c for c in category_order if totals.get(c, 0) > 0]
    extras = sorted(
        (c for c, v in totals.items() if v > 0 and c not in category_order),
        key=lambda c: totals[c],
        reverse=True,
    )
    return ordered + extras


def build_flow_graph(
    view: AggregateView,
    category_order: Sequence[str],
    colors: Mapping[str, str],
) -> FlowGraph:
    """
    Build nodes and links for a flow diagram of an aggregate view.

    Node 0 is the root. Parent nodes follow in category order, then
    subcategory nodes grouped by parent, largest first. Only positive
    amounts produce nodes.
    """
    nodes: List[FlowNode] = [
        FlowNode(
            index=0,
            name=ROOT_NODE_NAME,
            kind=NodeKind.ROOT,
            value=view.total,
            color=ROOT_COLOR,
        )
    ]
    links: List[FlowLink] = []
    parent_index: Dict[str, int] = {}

    categories = _ordered_categories(view, category_order)
    for category in categories:
        color = colors.get(category, FALLBACK_COLOR)
        node = FlowNode(
            index=len(nodes),
            name=category,
            kind=NodeKind.PARENT,
            value=view.category_totals[category],
            color=color,
            category=category,
        )
        parent_index[category] = node.index
        nodes.append(node)
        links.append(
            FlowLink(
                source=0,
                target=node.index,
                value=node.value,
                kind=NodeKind.PARENT,
                color=color,
                category=category,
            )
        )

    for category in categories:
        color = colors.get(category, FALLBACK_COLOR)
        subs = view.subcategory_totals.get(category, {})
        for sub in sorted(subs, key=lambda s: subs[s], reverse=True):
            if subs[sub] <= 0:
                continue
            node = FlowNode(
                index=len(nodes),
                name=sub,
                kind=NodeKind.SUB,
                value=subs[sub],
                color=color,
                category=category,
                subcategory=sub,
            )
            nodes.append(node)
            links.append(
                FlowLink(
                    source=parent_index[category],
                    target=node.index,
                    value=node.value,
                    kind=NodeKind.SUB,
                    color=color,
                    category=category,
                    subcategory=sub,
                )
            )

    return FlowGraph(nodes=nodes, links=links, total=view.total)


def neighbors(graph: FlowGraph, index: int) -> Set[int]:
    """
    Nodes to keep highlighted while hovering a node.

    - root: itself and every parent it links to
    - parent: itself, the root and its subcategories
    - sub: itself, its parent and the root
    """
    node = graph.node(index)
    if node is None:
        return set()

    related = {index}
    if node.kind == NodeKind.ROOT:
        related.update(link.target for link in graph.links if link.source == index)
    elif node.kind == NodeKind.PARENT:
        related.add(0)
        related.update(link.target for link in graph.links if link.source == index)
    else:
        related.add(0)
        related.update(link.source for link in graph.links if link.target == index)
    return related
