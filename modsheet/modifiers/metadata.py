"""Parser for the `{name, key: value, ...}` header that prefixes inline modifiers."""

from typing import Any

from modsheet.syntax.cursor import Cursor, Failure, ParseResult, Success, expected
from modsheet.syntax.nodes import Metadata
from modsheet.syntax.primitives import (
    parse_atom,
    parse_blank,
    parse_literal,
    parse_number,
    parse_plain_string,
)

_FIELD_KEYS = frozenset({"file", "line", "module", "source"})


def parse_modifier_header(cursor: Cursor) -> ParseResult[tuple[str, Metadata]]:
    """`{` atom [`,` fields] `}` -> (modifier name, metadata).

    A header without fields yields empty metadata.
    """
    opened = parse_literal(cursor, "{")
    if isinstance(opened, Failure):
        return opened

    name = parse_atom(parse_blank(opened.cursor).cursor)
    if isinstance(name, Failure):
        return name

    end = parse_blank(name.cursor).cursor
    metadata = Metadata.empty()
    if end.current == ",":
        fields = parse_metadata_fields(parse_blank(end.advance()).cursor)
        if isinstance(fields, Failure):
            return fields
        metadata, end = fields.value, fields.cursor

    closed = parse_literal(parse_blank(end).cursor, "}")
    if isinstance(closed, Failure):
        return closed
    return Success((name.value, metadata), closed.cursor)


def parse_metadata_fields(cursor: Cursor) -> ParseResult[Metadata]:
    """Comma separated `key: value` fields up to (not including) the closing brace."""
    values: dict[str, str | int | float | None] = {}
    end = cursor
    while end.current != "}":
        key = parse_atom(end)
        if isinstance(key, Failure):
            return key
        colon = parse_literal(key.cursor, ":")
        if isinstance(colon, Failure):
            return colon

        value = _parse_field_value(parse_blank(colon.cursor).cursor)
        if isinstance(value, Failure):
            return value
        # Unknown keys are read and dropped.
        if key.value in _FIELD_KEYS:
            values[key.value] = value.value

        end = parse_blank(value.cursor).cursor
        if end.current == ",":
            end = parse_blank(end.advance()).cursor
        elif end.current != "}":
            return expected(end, ",", "}")

    # Mistyped values are dropped.
    return Success(
        Metadata(
            file=_typed(values.get("file"), str),
            line=_typed(values.get("line"), int),
            module=_typed(values.get("module"), str),
            source=_typed(values.get("source"), str),
        ),
        end,
    )


def _parse_field_value(cursor: Cursor) -> ParseResult[str | int | float | None]:
    if cursor.current == '"':
        return parse_plain_string(cursor)
    if cursor.current == "-" or cursor.current.isdigit():
        return parse_number(cursor)

    # Bare alias such as `MyApp.Styles`, or `nil`.
    first = parse_atom(cursor)
    if isinstance(first, Failure):
        return expected(cursor, "string", "number", "alias")
    segments = [first.value]
    end = first.cursor
    while end.current == ".":
        segment = parse_atom(end.advance())
        if isinstance(segment, Failure):
            break
        segments.append(segment.value)
        end = segment.cursor
    if segments == ["nil"]:
        return Success(None, end)
    return Success(".".join(segments), end)


def _typed(value: str | int | float | None, kind: type) -> Any:
    return value if isinstance(value, kind) else None
