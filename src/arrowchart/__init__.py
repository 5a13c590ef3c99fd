"""arrowchart: arrow shorthand flowchart text to a positioned node/connection graph."""

from arrowchart.config import LayoutConfig
from arrowchart.ir import ChartGraph, Connection, Node, ParseResult
from arrowchart.parsers import parse
from arrowchart.types import BracketShape, ConnectionDirection, NodeKind

__all__ = [
    "BracketShape",
    "ChartGraph",
    "Connection",
    "ConnectionDirection",
    "LayoutConfig",
    "Node",
    "NodeKind",
    "ParseResult",
    "parse",
    "parse_to_dict",
]


def parse_to_dict(src: str, config: LayoutConfig | None = None) -> dict:
    """Parse arrow chart text and return the renderer-facing dict.

    Args:
        src: Chart source, one statement per line.
        config: Optional layout constants; None uses the defaults.

    Returns:
        A dict with errorMessage, chartType, chartName, nodes and connections.
    """
    return parse(src, config).to_dict()
