"""Primitive parsers over a `Cursor`.

Every primitive either succeeds with the cursor advanced past what it
consumed, or fails having consumed nothing.
"""

from modsheet.diagnostics import (
    PARSER_INVALID_NUMBER,
    PARSER_UNTERMINATED_INTERPOLATION,
    PARSER_UNTERMINATED_STRING,
)
from modsheet.syntax.cursor import Cursor, Failure, ParseResult, Success, expected, fail
from modsheet.syntax.nodes import Interpolation

_INLINE_WHITESPACE = frozenset({" ", "\t"})
_LINE_BREAKS = frozenset({"\n", "\r"})
_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t", "r": "\r", "#": "#"}


def is_identifier_start(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def is_identifier_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def parse_whitespace(cursor: Cursor) -> Success[str]:
    """Spaces and tabs. Always succeeds, possibly consuming nothing."""
    end = cursor
    while not end.is_eof and end.current in _INLINE_WHITESPACE:
        end = end.advance()
    return Success(cursor.text_to(end), end)


def parse_blank(cursor: Cursor) -> Success[str]:
    """Spaces, tabs and line breaks. Always succeeds."""
    end = cursor
    while not end.is_eof and (end.current in _INLINE_WHITESPACE or end.current in _LINE_BREAKS):
        end = end.advance()
    return Success(cursor.text_to(end), end)


def at_comment(cursor: Cursor) -> bool:
    return cursor.current == "#" and cursor.peek() != "{"


def skip_comment(cursor: Cursor) -> Cursor:
    # Consume until end of line, do not consume the newline itself.
    if not at_comment(cursor):
        return cursor
    end = cursor.advance()
    while not end.is_eof and end.current not in _LINE_BREAKS:
        end = end.advance()
    return end


def skip_trivia(cursor: Cursor) -> Cursor:
    """Skip blanks and `#` comments (but not `#{` interpolations)."""
    while True:
        after = skip_comment(parse_blank(cursor).cursor)
        if after == cursor:
            return cursor
        cursor = after


def skip_inline_trivia(cursor: Cursor) -> Cursor:
    """Skip spaces, tabs and a trailing comment, stopping at the line break."""
    return skip_comment(parse_whitespace(cursor).cursor)


def at_line_end(cursor: Cursor) -> bool:
    return cursor.is_eof or cursor.current in _LINE_BREAKS


def parse_literal(cursor: Cursor, text: str) -> ParseResult[str]:
    """Exact delimiter or keyword text."""
    if cursor.startswith(text):
        return Success(text, cursor.advance(len(text)))
    return expected(cursor, text)


def parse_keyword(cursor: Cursor, word: str) -> ParseResult[str]:
    """Like `parse_literal` but refuses to split an identifier (`done` is not `do`)."""
    result = parse_literal(cursor, word)
    if isinstance(result, Success) and is_identifier_char(result.cursor.current):
        return expected(cursor, word)
    return result


def parse_atom(cursor: Cursor) -> ParseResult[str]:
    """Identifier-shaped token: an ASCII letter followed by letters, digits or `_`."""
    if not is_identifier_start(cursor.current):
        return expected(cursor, "identifier")
    end = cursor.advance()
    while is_identifier_char(end.current):
        end = end.advance()
    return Success(cursor.text_to(end), end)


def parse_number(cursor: Cursor) -> ParseResult[int | float]:
    """`-?digits(.digits)?`.

    Digits running straight into an identifier character (`12px`) are a
    malformed literal rather than `12` followed by `px`.
    """
    end = cursor
    if end.current == "-":
        end = end.advance()
    if not end.current.isdigit():
        return expected(cursor, "number")

    saw_dot = False
    while not end.is_eof:
        ch = end.current
        if ch.isdigit():
            end = end.advance()
            continue
        if ch == "." and not saw_dot and end.peek().isdigit():
            saw_dot = True
            end = end.advance()
            continue
        break

    if is_identifier_char(end.current) or end.current == ".":
        bad_end = end
        while is_identifier_char(bad_end.current) or bad_end.current == ".":
            bad_end = bad_end.advance()
        return fail(
            PARSER_INVALID_NUMBER,
            cursor,
            bad_end,
            message=f"{PARSER_INVALID_NUMBER.message} `{cursor.text_to(bad_end)}`",
        )

    text = cursor.text_to(end)
    return Success(float(text) if saw_dot else int(text), end)


def parse_interpolation(cursor: Cursor) -> ParseResult[Interpolation]:
    """`#{expression}` with balanced inner braces."""
    if not cursor.startswith("#{"):
        return expected(cursor, "#{")
    body_start = cursor.advance(2)
    end = body_start
    depth = 1
    while not end.is_eof:
        ch = end.current
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                expression = body_start.text_to(end).strip()
                return Success(Interpolation(expression), end.advance())
        elif ch in _LINE_BREAKS:
            break
        end = end.advance()
    return fail(PARSER_UNTERMINATED_INTERPOLATION, cursor, end)


def parse_string(cursor: Cursor) -> ParseResult[tuple[str | Interpolation, ...]]:
    """Double-quoted string as literal text segments and `#{...}` interpolations.

    A plain string comes back as a single `str` segment (or none when empty).
    """
    if cursor.current != '"':
        return expected(cursor, '"')

    parts: list[str | Interpolation] = []
    buffer: list[str] = []
    end = cursor.advance()

    while not end.is_eof:
        ch = end.current
        if ch == '"':
            if buffer:
                parts.append("".join(buffer))
            return Success(tuple(parts), end.advance())
        if ch in _LINE_BREAKS:
            break
        if ch == "\\":
            escaped = _ESCAPES.get(end.peek())
            if escaped is None:
                # Unknown escapes keep the backslash.
                buffer.append(ch)
                end = end.advance()
                continue
            buffer.append(escaped)
            end = end.advance(2)
            continue
        if end.startswith("#{"):
            interpolation = parse_interpolation(end)
            if isinstance(interpolation, Failure):
                return interpolation
            if buffer:
                parts.append("".join(buffer))
                buffer = []
            parts.append(interpolation.value)
            end = interpolation.cursor
            continue
        buffer.append(ch)
        end = end.advance()

    return fail(PARSER_UNTERMINATED_STRING, cursor, end)


def parse_plain_string(cursor: Cursor) -> ParseResult[str]:
    """String literal without interpolation, as used by metadata fields."""
    result = parse_string(cursor)
    if isinstance(result, Failure):
        return result
    if any(not isinstance(part, str) for part in result.value):
        return expected(cursor, "plain string")
    return Success("".join(result.value), result.cursor)


def escape_string(value: str) -> str:
    """Inverse of `parse_plain_string`, without the surrounding quotes."""
    out: list[str] = []
    for ch in value:
        if ch in ('"', "\\", "#"):
            out.append("\\" + ch)
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\r":
            out.append("\\r")
        else:
            out.append(ch)
    return "".join(out)
