"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from arrowchart.ir.model import ParseResult


class Parser(Protocol):
    """Protocol that all chart parsers must implement."""

    def parse(self, src: str) -> ParseResult:
        """Parse source text into a ParseResult."""
        ...
