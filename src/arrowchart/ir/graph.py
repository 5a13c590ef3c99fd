"""Graph view — converts a ParseResult into a networkx DiGraph for analysis.

The parse output is a flat node/connection list tuned for the renderer.
ChartGraph wraps the same data in a DiGraph so callers can ask topology
questions (cycles, ordering, degrees) without re-deriving adjacency.
"""

from __future__ import annotations

import networkx as nx

from arrowchart.ir.model import Connection, Node, ParseResult


class ChartGraph:
    """A networkx-backed view over a parsed chart.

    Node data lives under the ``data`` attribute; edge data under ``connection``.
    Repeated connections between the same pair collapse into one edge that keeps
    the first connection seen.
    """

    def __init__(self, digraph: nx.DiGraph) -> None:
        self.digraph = digraph

    @classmethod
    def from_result(cls, result: ParseResult) -> ChartGraph:
        digraph: nx.DiGraph = nx.DiGraph()
        for node in result.nodes:
            _add_node(digraph, node)
        for conn in result.connections:
            _add_edge(digraph, conn)
        return cls(digraph)

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def topological_order(self) -> list[str] | None:
        try:
            return list(nx.topological_sort(self.digraph))
        except nx.NetworkXUnfeasible:
            return None

    def adjacency_list(self) -> list[tuple[str, list[str]]]:
        result: list[tuple[str, list[str]]] = []
        for node_id in self.digraph.nodes:
            result.append((node_id, sorted(self.digraph.successors(node_id))))
        result.sort(key=lambda x: x[0])
        return result


def _add_node(digraph: nx.DiGraph, node: Node) -> None:
    if node.id not in digraph:
        digraph.add_node(node.id, data=node)


def _add_edge(digraph: nx.DiGraph, conn: Connection) -> None:
    if not digraph.has_edge(conn.from_id, conn.to_id):
        digraph.add_edge(conn.from_id, conn.to_id, connection=conn)
