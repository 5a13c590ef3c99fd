"""Shared type definitions for arrowchart.

Enums used across the parser, registry, layout, and output model.
"""

from __future__ import annotations

from enum import Enum


class NodeKind(Enum):
    Node = "node"
    Block = "block"

    @classmethod
    def default(cls) -> NodeKind:
        return cls.Node


class BracketShape(Enum):
    PlainBox = "[]"  # id - [Label]
    SubroutineBox = "[[]]"  # id - [[Label]]
    RoundBox = "()"  # id - (Label)
    CircleBox = "(())"  # id - ((Label))
    StadiumBox = "[()]"  # id - [(Label)]

    @classmethod
    def default(cls) -> BracketShape:
        return cls.PlainBox


class ConnectionDirection(Enum):
    Forward = "forward"  # -->
    Backward = "backward"  # <--
