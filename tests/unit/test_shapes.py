"""Tests for arrowchart.parsers.shapes — marker classification."""

import pytest

from arrowchart.parsers.shapes import classify, kind_for_shape, shape_for_marker
from arrowchart.types import BracketShape, NodeKind


@pytest.mark.parametrize(
    ("marker", "shape", "kind"),
    [
        ("[", BracketShape.PlainBox, NodeKind.Node),
        ("[[", BracketShape.SubroutineBox, NodeKind.Node),
        ("(", BracketShape.RoundBox, NodeKind.Block),
        ("((", BracketShape.CircleBox, NodeKind.Block),
        ("[(", BracketShape.StadiumBox, NodeKind.Block),
    ],
)
def test_known_markers(marker, shape, kind):
    assert classify(marker) == (shape, kind)


def test_missing_marker_defaults_to_plain_node():
    assert classify(None) == (BracketShape.PlainBox, NodeKind.Node)


def test_unknown_marker_defaults_to_plain_node():
    assert shape_for_marker("(((") == BracketShape.PlainBox
    assert classify("([") == (BracketShape.PlainBox, NodeKind.Node)


def test_kind_follows_shape():
    assert kind_for_shape(BracketShape.StadiumBox) == NodeKind.Block
    assert kind_for_shape(BracketShape.SubroutineBox) == NodeKind.Node


def test_shape_tags_serialize_as_bracket_pairs():
    assert [s.value for s in BracketShape] == ["[]", "[[]]", "()", "(())", "[()]"]
