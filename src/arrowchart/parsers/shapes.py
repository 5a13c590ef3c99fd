"""Shape classifier — opening bracket marker to shape tag and node kind."""

from __future__ import annotations

from arrowchart.types import BracketShape, NodeKind

_MARKER_SHAPES: dict[str, BracketShape] = {
    "[": BracketShape.PlainBox,
    "[[": BracketShape.SubroutineBox,
    "(": BracketShape.RoundBox,
    "((": BracketShape.CircleBox,
    "[(": BracketShape.StadiumBox,
}

_BLOCK_SHAPES = frozenset({BracketShape.RoundBox, BracketShape.CircleBox, BracketShape.StadiumBox})


def shape_for_marker(marker: str | None) -> BracketShape:
    """Unknown or missing markers fall back to the plain box."""
    if marker is None:
        return BracketShape.default()
    return _MARKER_SHAPES.get(marker, BracketShape.default())


def kind_for_shape(shape: BracketShape) -> NodeKind:
    return NodeKind.Block if shape in _BLOCK_SHAPES else NodeKind.Node


def classify(marker: str | None) -> tuple[BracketShape, NodeKind]:
    shape = shape_for_marker(marker)
    return shape, kind_for_shape(shape)
