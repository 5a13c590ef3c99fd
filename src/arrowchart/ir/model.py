"""Output model for a parsed arrow chart.

These types are what the rendering surface consumes: nodes with their
placement and adjacency, directed connections, and the top-level result
carrying the (single) error message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from arrowchart.types import BracketShape, ConnectionDirection, NodeKind


@dataclass
class Node:
    id: str
    kind: NodeKind
    label: str
    x: int
    y: int
    shape: BracketShape = field(default_factory=BracketShape.default)
    incoming: list[str] = field(default_factory=list)
    outgoing: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.kind.value,
            "label": self.label,
            "x": self.x,
            "y": self.y,
            "incoming": list(self.incoming),
            "outgoing": list(self.outgoing),
            "bracketType": self.shape.value,
        }


@dataclass
class Connection:
    from_id: str
    to_id: str
    direction: ConnectionDirection = ConnectionDirection.Forward

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id, "direction": self.direction.value}


@dataclass
class ParseResult:
    """Everything one parse pass produced.

    ``chart_type`` and ``chart_name`` are reserved and always empty.
    ``error_message`` holds only the most recent failing line.
    """

    error_message: str = ""
    chart_type: str = ""
    chart_name: str = ""
    nodes: list[Node] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.error_message

    def get_node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape the rendering surface reads."""
        return {
            "errorMessage": self.error_message,
            "chartType": self.chart_type,
            "chartName": self.chart_name,
            "nodes": [n.to_dict() for n in self.nodes],
            "connections": [c.to_dict() for c in self.connections],
        }
