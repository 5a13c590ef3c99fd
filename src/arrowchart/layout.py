"""Incremental layout — seed coordinates assigned once, at node creation.

Rows stack top to bottom in first-discovery order. Children of one source
fan out alternately right and left of it, each pair one step farther out:

    n = 0 -> +1 step, n = 1 -> -1 step, n = 2 -> +2 steps, n = 3 -> -2 steps, ...
"""

from __future__ import annotations

from arrowchart.config import DEFAULT_LAYOUT, LayoutConfig
from arrowchart.ir.model import Node


def row_y(index: int, config: LayoutConfig = DEFAULT_LAYOUT) -> int:
    """Y coordinate for the node created when the registry holds ``index`` nodes."""
    return config.origin_y + config.row_spacing * index


def fan_offset(sibling_count: int, config: LayoutConfig = DEFAULT_LAYOUT) -> int:
    """Signed x offset of the next child of a source with ``sibling_count`` children."""
    distance = config.fan_step * (1 + sibling_count // 2)
    return distance if sibling_count % 2 == 0 else -distance


def estimate_x(source: Node | None, config: LayoutConfig = DEFAULT_LAYOUT) -> tuple[int, int]:
    """Return ``(source_x, target_x)`` for an edge leaving ``source``.

    An unregistered source (None) seeds a fresh region at the fixed default pair.
    """
    if source is None:
        return config.seed_source_x, config.seed_target_x
    return source.x, source.x + fan_offset(len(source.outgoing), config)
