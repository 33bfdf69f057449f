from modsheet.text import LineIndex, TextRange, TextSize, slice_text_range


def test_line_index_maps_offsets_to_line_and_column() -> None:
    index = LineIndex("ab\ncde\n\nf")

    assert index.line_count == 4
    assert index.line_col(0) == (1, 1)
    assert index.line_col(2) == (1, 3)
    assert index.line_col(3) == (2, 1)
    assert index.line_col(7) == (3, 1)
    assert index.line_col(8) == (4, 1)


def test_line_index_line_text_strips_line_breaks() -> None:
    index = LineIndex("first\r\n  second  \n")

    assert index.line_text(1) == "first"
    assert index.line_text(2) == "  second  "
    assert index.line_text(3) == ""
    assert index.line_text(0) == ""
    assert index.line_text(99) == ""


def test_line_index_breaks_on_bare_carriage_returns() -> None:
    index = LineIndex("a\rb\r\nc\u2028d\n")

    assert index.line_count == 4
    assert index.line_col(2) == (2, 1)
    assert index.line_col(5) == (3, 1)
    assert index.line_text(1) == "a"
    assert index.line_text(3) == "c\u2028d"


def test_text_range_helpers() -> None:
    source = "color(.red)"
    range = TextRange.at(TextSize(6), TextSize(4))

    assert slice_text_range(source, range) == ".red"
    assert range.cover(TextRange.empty(TextSize(0))).as_tuple() == (0, 10)
    assert range.contains(TextSize(6))
    assert not range.contains(TextSize(10))
