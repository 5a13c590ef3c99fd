"""Arrow chart parser — whole-line pattern matching.

Each line is one statement in one of three forms, tried in this order:

    A - [Start] --> B - (Next)      full definition, forward
    A --> B - (Next)                simple connection, forward
    B - (Next) <-- A                reverse connection, backward

A form only counts if it consumes the entire line. A line matching none of
them is rejected as a whole and leaves the graph untouched.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from arrowchart.config import DEFAULT_LAYOUT, LayoutConfig
from arrowchart.ir.model import ParseResult
from arrowchart.layout import estimate_x
from arrowchart.parsers.shapes import classify
from arrowchart.registry import ConnectionRecorder, NodeRegistry
from arrowchart.types import ConnectionDirection

logger = logging.getLogger(__name__)

# ─── Grammar ─────────────────────────────────────────────────────────────────

_ID = r"(.+?)"
_SHAPED = r"\s*-\s*([\[(]+)(.+?)[)\]]+"

_FULL_DEFINITION_RE = re.compile(_ID + _SHAPED + r"\s*-->\s*" + _ID + _SHAPED)
_SIMPLE_CONNECTION_RE = re.compile(_ID + r"\s*-->\s*" + _ID + _SHAPED)
_REVERSE_CONNECTION_RE = re.compile(_ID + _SHAPED + r"\s*<--\s*" + _ID + r"\s*")

ERROR_TEMPLATE = "Invalid syntax on line {line}"


@dataclass
class LineMatch:
    """Fields extracted from one matched line, already in true edge direction.

    ``source_id`` is always the edge's tail, whichever textual form produced it.
    Markers and labels are None for endpoints referenced by bare id.
    """

    source_id: str
    target_id: str
    direction: ConnectionDirection
    source_marker: str | None = None
    source_label: str | None = None
    target_marker: str | None = None
    target_label: str | None = None


def _match_full_definition(line: str) -> LineMatch | None:
    m = _FULL_DEFINITION_RE.fullmatch(line)
    if m is None:
        return None
    src_id, src_marker, src_label, tgt_id, tgt_marker, tgt_label = m.groups()
    return LineMatch(
        source_id=src_id.strip(),
        target_id=tgt_id.strip(),
        direction=ConnectionDirection.Forward,
        source_marker=src_marker,
        source_label=src_label.strip(),
        target_marker=tgt_marker,
        target_label=tgt_label.strip(),
    )


def _match_simple_connection(line: str) -> LineMatch | None:
    m = _SIMPLE_CONNECTION_RE.fullmatch(line)
    if m is None:
        return None
    src_id, tgt_id, tgt_marker, tgt_label = m.groups()
    return LineMatch(
        source_id=src_id.strip(),
        target_id=tgt_id.strip(),
        direction=ConnectionDirection.Forward,
        target_marker=tgt_marker,
        target_label=tgt_label.strip(),
    )


def _match_reverse_connection(line: str) -> LineMatch | None:
    # The shaped endpoint on the left is the edge's head; the bare id is its tail.
    m = _REVERSE_CONNECTION_RE.fullmatch(line)
    if m is None:
        return None
    tgt_id, tgt_marker, tgt_label, src_id = m.groups()
    return LineMatch(
        source_id=src_id.strip(),
        target_id=tgt_id.strip(),
        direction=ConnectionDirection.Backward,
        target_marker=tgt_marker,
        target_label=tgt_label.strip(),
    )


_RULES: list[tuple[str, Callable[[str], LineMatch | None]]] = [
    ("full-definition", _match_full_definition),
    ("simple-connection", _match_simple_connection),
    ("reverse-connection", _match_reverse_connection),
]


def match_line(line: str) -> LineMatch | None:
    """Classify one line into the first form that consumes it entirely."""
    for name, rule in _RULES:
        matched = rule(line)
        if matched is None:
            continue
        if not matched.source_id or not matched.target_id:
            logger.debug("rule %s matched with a blank identifier: %r", name, line)
            return None
        return matched
    return None


# ─── Driver ──────────────────────────────────────────────────────────────────


class ArrowChartParser:
    """Arrow chart parser: one pass, one statement per line."""

    def __init__(self, config: LayoutConfig = DEFAULT_LAYOUT) -> None:
        self.config = config

    def parse(self, src: str) -> ParseResult:
        if not isinstance(src, str):
            raise TypeError(f"expected str, got {type(src).__name__}")

        result = ParseResult()
        if not src:
            return result

        registry = NodeRegistry(self.config)
        recorder = ConnectionRecorder(registry)

        for index, line in enumerate(src.split("\n"), start=1):
            matched = match_line(line)
            if matched is None:
                # Only the last failing line is reported.
                result.error_message = ERROR_TEMPLATE.format(line=index)
                logger.debug("line %d rejected: %r", index, line)
                continue
            self._apply(matched, registry, recorder)

        result.nodes = registry.nodes()
        result.connections = recorder.connections
        logger.debug(
            "parsed %d nodes, %d connections (error: %r)",
            len(result.nodes),
            len(result.connections),
            result.error_message,
        )
        return result

    def _apply(self, matched: LineMatch, registry: NodeRegistry, recorder: ConnectionRecorder) -> None:
        source_x, target_x = estimate_x(registry.get(matched.source_id), self.config)

        source_shape, source_kind = classify(matched.source_marker)
        registry.get_or_create(
            matched.source_id, source_kind, matched.source_label or "", source_shape, source_x
        )
        target_shape, target_kind = classify(matched.target_marker)
        registry.get_or_create(
            matched.target_id, target_kind, matched.target_label or "", target_shape, target_x
        )

        recorder.record(matched.source_id, matched.target_id, matched.direction)
