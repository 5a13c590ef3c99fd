"""Node registry and connection recorder.

The registry is insert-if-absent: the first declaration of an id fixes its
kind, label, shape and position for the rest of the pass.
"""

from __future__ import annotations

from collections.abc import Iterator

from arrowchart.config import DEFAULT_LAYOUT, LayoutConfig
from arrowchart.ir.model import Connection, Node
from arrowchart.layout import row_y
from arrowchart.types import BracketShape, ConnectionDirection, NodeKind


class NodeRegistry:
    """Nodes keyed by id, in first-discovery order."""

    def __init__(self, config: LayoutConfig = DEFAULT_LAYOUT) -> None:
        self._config = config
        self._nodes: dict[str, Node] = {}

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def get(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def get_or_create(
        self,
        node_id: str,
        kind: NodeKind,
        label: str,
        shape: BracketShape,
        x: int,
    ) -> Node:
        """Return the node for ``node_id``, creating it only if absent.

        For an existing id every other argument is ignored.
        """
        node = self._nodes.get(node_id)
        if node is not None:
            return node
        node = Node(
            id=node_id,
            kind=kind,
            label=label or node_id,
            x=x,
            y=row_y(len(self._nodes), self._config),
            shape=shape,
        )
        self._nodes[node_id] = node
        return node

    def nodes(self) -> list[Node]:
        return list(self._nodes.values())


class ConnectionRecorder:
    """Appends connections and keeps endpoint adjacency duplicate-free."""

    def __init__(self, registry: NodeRegistry) -> None:
        self._registry = registry
        self.connections: list[Connection] = []

    def record(self, from_id: str, to_id: str, direction: ConnectionDirection) -> Connection:
        """Record the edge ``from_id -> to_id``.

        Both endpoints must already be registered; ``direction`` is provenance only.
        """
        source = self._registry.get(from_id)
        target = self._registry.get(to_id)
        if source is None or target is None:
            missing = from_id if source is None else to_id
            raise KeyError(f"node '{missing}' is not registered")

        conn = Connection(from_id=from_id, to_id=to_id, direction=direction)
        self.connections.append(conn)
        if to_id not in source.outgoing:
            source.outgoing.append(to_id)
        if from_id not in target.incoming:
            target.incoming.append(from_id)
        return conn
