"""Tests for arrowchart.parsers.arrow — whole-line form matching."""

from arrowchart.parsers.arrow import match_line
from arrowchart.types import ConnectionDirection


def test_full_definition():
    m = match_line("A - [Start] --> B - (Next)")
    assert m is not None
    assert m.source_id == "A"
    assert m.source_marker == "["
    assert m.source_label == "Start"
    assert m.target_id == "B"
    assert m.target_marker == "("
    assert m.target_label == "Next"
    assert m.direction == ConnectionDirection.Forward


def test_simple_connection():
    m = match_line("A --> B - [[Sub]]")
    assert m is not None
    assert m.source_id == "A"
    assert m.source_marker is None
    assert m.source_label is None
    assert m.target_id == "B"
    assert m.target_marker == "[["
    assert m.target_label == "Sub"
    assert m.direction == ConnectionDirection.Forward


def test_reverse_connection_swaps_endpoints():
    m = match_line("A - ((Done)) <-- B")
    assert m is not None
    assert m.source_id == "B"
    assert m.source_marker is None
    assert m.target_id == "A"
    assert m.target_marker == "(("
    assert m.target_label == "Done"
    assert m.direction == ConnectionDirection.Backward


def test_full_definition_wins_over_simple_connection():
    m = match_line("A - [a] --> B - [b]")
    assert m is not None
    assert m.source_marker == "["
    assert m.source_label == "a"


def test_stadium_marker_captured_whole():
    m = match_line("A --> DB - [(Store)]")
    assert m is not None
    assert m.target_marker == "[("
    assert m.target_label == "Store"


def test_whitespace_around_tokens_is_ignored():
    m = match_line("  A   -->   B -   [ Label ]")
    assert m is not None
    assert m.source_id == "A"
    assert m.target_id == "B"
    assert m.target_label == "Label"


def test_trailing_whitespace_on_reverse_form():
    m = match_line("A - [x] <-- B   ")
    assert m is not None
    assert m.source_id == "B"


def test_hyphenated_identifier():
    m = match_line("my-node --> other - [x]")
    assert m is not None
    assert m.source_id == "my-node"
    assert m.target_id == "other"


def test_close_brackets_are_lenient():
    m = match_line("A --> B - [Label)")
    assert m is not None
    assert m.target_label == "Label"


def test_unclosed_bracket_rejected():
    assert match_line("A - [Start --> B") is None


def test_missing_arrow_rejected():
    assert match_line("A - [Start] B - [End]") is None


def test_missing_shape_rejected():
    assert match_line("A --> B") is None


def test_trailing_text_rejected():
    assert match_line("A --> B - [x] extra") is None


def test_empty_line_rejected():
    assert match_line("") is None


def test_blank_identifier_rejected():
    assert match_line(" - [x] <-- B") is None
