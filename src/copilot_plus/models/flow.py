"""
Flow graph models (total -> category -> subcategory).
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    ROOT = "root"
    PARENT = "parent"
    SUB = "sub"


class FlowNode(BaseModel):
    """A node in the flow graph."""

    model_config = {"frozen": True}

    index: int
    name: str
    kind: NodeKind
    value: float
    color: str
    category: Optional[str] = None
    subcategory: Optional[str] = None

    def drilldown(self) -> Tuple[Optional[str], Optional[str]]:
        """(parent_category, sub_category) arguments for a transaction query."""
        if self.kind == NodeKind.ROOT:
            return None, None
        if self.kind == NodeKind.PARENT:
            return self.category, None
        return self.category, self.subcategory


class FlowLink(BaseModel):
    """A flow between two nodes, identified by node index."""

    model_config = {"frozen": True}

    source: int
    target: int
    value: float
    kind: NodeKind  # kind of the target node
    color: str
    category: str
    subcategory: Optional[str] = None

    def drilldown(self) -> Tuple[Optional[str], Optional[str]]:
        """A link resolves to the transactions of its target node."""
        return self.category, self.subcategory


class FlowGraph(BaseModel):
    """Complete node/link structure for a flow diagram."""

    model_config = {"frozen": True}

    nodes: List[FlowNode] = Field(default_factory=list)
    links: List[FlowLink] = Field(default_factory=list)
    total: float = 0.0

    def node(self, index: int) -> Optional[FlowNode]:
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None
