"""Parser entry point."""

from __future__ import annotations

from arrowchart.config import DEFAULT_LAYOUT, LayoutConfig
from arrowchart.ir.model import ParseResult
from arrowchart.parsers.arrow import ArrowChartParser, LineMatch, match_line
from arrowchart.parsers.base import Parser

__all__ = ["ArrowChartParser", "LineMatch", "Parser", "match_line", "parse"]


def parse(src: str, config: LayoutConfig | None = None) -> ParseResult:
    """Parse arrow chart text into nodes and connections.

    Never raises on bad lines; check ``error_message`` on the result.
    """
    parser: Parser = ArrowChartParser(config or DEFAULT_LAYOUT)
    return parser.parse(src)
