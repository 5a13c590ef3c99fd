"""Intermediate representation: parse output and its graph view."""

from arrowchart.ir.graph import ChartGraph
from arrowchart.ir.model import Connection, Node, ParseResult

__all__ = [
    "ChartGraph",
    "Connection",
    "Node",
    "ParseResult",
]
