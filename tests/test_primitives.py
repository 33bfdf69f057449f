import pytest

from modsheet.syntax import (
    Cursor,
    Failure,
    Interpolation,
    Success,
    parse_atom,
    parse_blank,
    parse_interpolation,
    parse_keyword,
    parse_literal,
    parse_number,
    parse_plain_string,
    parse_string,
    parse_whitespace,
    skip_trivia,
)


def test_whitespace_succeeds_on_empty_input_without_consuming() -> None:
    cursor = Cursor("")
    result = parse_whitespace(cursor)

    assert isinstance(result, Success)
    assert result.value == ""
    assert result.cursor == cursor


def test_whitespace_stops_at_line_break_but_blank_does_not() -> None:
    assert parse_whitespace(Cursor(" \t\n x")).cursor.offset == 2
    assert parse_blank(Cursor(" \t\n x")).cursor.offset == 4


def test_atom_accepts_identifier_shaped_tokens() -> None:
    result = parse_atom(Cursor("buttonStyle_2(.x)"))

    assert isinstance(result, Success)
    assert result.value == "buttonStyle_2"
    assert result.cursor.current == "("


@pytest.mark.parametrize("source", ["2abc", "_x", "", "-x"])
def test_atom_rejects_non_identifiers(source: str) -> None:
    assert isinstance(parse_atom(Cursor(source)), Failure)


def test_literal_and_keyword() -> None:
    assert isinstance(parse_literal(Cursor("<> var"), "<>"), Success)
    assert isinstance(parse_keyword(Cursor("do\n"), "do"), Success)
    assert isinstance(parse_keyword(Cursor("done"), "do"), Failure)


@pytest.mark.parametrize(
    ("source", "value", "rest"),
    [
        ("42", 42, ""),
        ("-7)", -7, ")"),
        ("1.5,", 1.5, ","),
        ("0", 0, ""),
    ],
)
def test_number_literals(source: str, value: int | float, rest: str) -> None:
    result = parse_number(Cursor(source))

    assert isinstance(result, Success)
    assert result.value == value
    assert type(result.value) is type(value)
    assert result.cursor.rest == rest


def test_number_with_identifier_suffix_is_malformed_not_truncated() -> None:
    cursor = Cursor("x(12px)").advance(2)
    result = parse_number(cursor)

    assert isinstance(result, Failure)
    diagnostic = result.to_diagnostic()
    assert diagnostic.code == "PARSER_INVALID_NUMBER"
    assert diagnostic.range.as_tuple() == (2, 6)
    assert "12px" in diagnostic.message


def test_string_with_escapes() -> None:
    result = parse_plain_string(Cursor(r'"a \"b\" \\ c\n" tail'))

    assert isinstance(result, Success)
    assert result.value == 'a "b" \\ c\n'
    assert result.cursor.rest == " tail"


def test_string_with_interpolation_segments() -> None:
    result = parse_string(Cursor('"Label: #{text}!"'))

    assert isinstance(result, Success)
    assert result.value == ("Label: ", Interpolation("text"), "!")


def test_escaped_hash_is_not_an_interpolation() -> None:
    result = parse_string(Cursor(r'"\#{text}"'))

    assert isinstance(result, Success)
    assert result.value == ("#{text}",)


def test_unterminated_string_reports_at_opening_quote() -> None:
    result = parse_string(Cursor('color("red\n)').advance(6))
    assert isinstance(result, Failure)
    diagnostic = result.to_diagnostic()
    assert diagnostic.code == "PARSER_UNTERMINATED_STRING"
    assert diagnostic.range.start.value == 6


def test_interpolation_balances_nested_braces() -> None:
    result = parse_interpolation(Cursor("#{ map[%{a: 1}] }rest"))

    assert isinstance(result, Success)
    assert result.value == Interpolation("map[%{a: 1}]")
    assert result.cursor.rest == "rest"


def test_unterminated_interpolation() -> None:
    result = parse_interpolation(Cursor("#{height"))

    assert isinstance(result, Failure)
    assert result.to_diagnostic().code == "PARSER_UNTERMINATED_INTERPOLATION"


def test_skip_trivia_skips_comments_but_not_interpolations() -> None:
    cursor = skip_trivia(Cursor("  # comment\n\n  #{x}"))

    assert cursor.rest == "#{x}"


@pytest.mark.parametrize(
    "parser",
    [parse_atom, parse_number, parse_string, parse_interpolation, parse_plain_string],
)
def test_failed_attempt_leaves_the_starting_cursor_usable(parser) -> None:
    cursor = Cursor("!! not a token")
    before = cursor.offset

    result = parser(cursor)

    assert isinstance(result, Failure)
    assert cursor.offset == before
    assert result.cursor.offset == before
