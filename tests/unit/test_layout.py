"""Tests for arrowchart.layout — seed placement and sibling fan-out."""

from arrowchart.config import LayoutConfig
from arrowchart.ir.model import Node
from arrowchart.layout import estimate_x, fan_offset, row_y
from arrowchart.types import NodeKind


def _node(x: int, outgoing: list[str]) -> Node:
    return Node(id="S", kind=NodeKind.Node, label="S", x=x, y=50, outgoing=outgoing)


def test_unregistered_source_gets_seed_pair():
    assert estimate_x(None) == (100, 300)


def test_first_child_goes_right():
    assert estimate_x(_node(400, [])) == (400, 650)


def test_second_child_goes_left():
    assert estimate_x(_node(400, ["a"])) == (400, 150)


def test_fan_out_steps_outward_in_pairs():
    assert [fan_offset(n) for n in range(6)] == [250, -250, 500, -500, 750, -750]


def test_row_y_stacks_by_discovery_index():
    assert [row_y(i) for i in range(4)] == [50, 200, 350, 500]


def test_custom_config():
    config = LayoutConfig(origin_y=0, row_spacing=10, seed_source_x=0, seed_target_x=5, fan_step=7)
    assert estimate_x(None, config) == (0, 5)
    assert estimate_x(_node(0, ["a", "b"]), config) == (0, 14)
    assert row_y(3, config) == 30
