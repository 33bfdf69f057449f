"""Grammar for modifier invocations and their argument expressions.

    invocation := atom "(" [argument ("," argument)* [","]] ")"
    argument   := [atom ":"] expression
    expression := "." atom ("." atom)*  |  ".#{" ... "}"  |  "#{" ... "}"
                | string | number | "true" | "false" | "nil" | invocation
"""

from modsheet.syntax.cursor import Cursor, Failure, ParseResult, Success, expected
from modsheet.syntax.nodes import (
    Argument,
    BooleanLiteral,
    Expression,
    InterpolatedMember,
    InterpolatedString,
    Invocation,
    MemberRef,
    NilLiteral,
    NumberLiteral,
    StringLiteral,
)
from modsheet.syntax.primitives import (
    is_identifier_char,
    parse_atom,
    parse_interpolation,
    parse_literal,
    parse_number,
    parse_string,
    parse_whitespace,
    skip_trivia,
)

_KEYWORD_VALUES: dict[str, Expression] = {
    "true": BooleanLiteral(True),
    "false": BooleanLiteral(False),
    "nil": NilLiteral(),
}


def parse_expression(cursor: Cursor) -> ParseResult[Expression]:
    ch = cursor.current

    if ch == ".":
        return _parse_member(cursor)

    if cursor.startswith("#{"):
        return parse_interpolation(cursor)

    if ch == '"':
        string = parse_string(cursor)
        if isinstance(string, Failure):
            return string
        parts = string.value
        if all(isinstance(part, str) for part in parts):
            return Success(StringLiteral("".join(parts)), string.cursor)
        return Success(InterpolatedString(parts), string.cursor)

    if ch == "-" or ch.isdigit():
        number = parse_number(cursor)
        if isinstance(number, Failure):
            return number
        return Success(NumberLiteral(number.value), number.cursor)

    atom = parse_atom(cursor)
    if isinstance(atom, Success):
        if atom.cursor.current == "(":
            return parse_invocation(cursor)
        keyword = _KEYWORD_VALUES.get(atom.value)
        if keyword is not None:
            return Success(keyword, atom.cursor)

    return expected(cursor, ".member", "number", "string", "#{...}", "invocation")


def _parse_member(cursor: Cursor) -> ParseResult[Expression]:
    after_dot = cursor.advance()
    if after_dot.startswith("#{"):
        interpolation = parse_interpolation(after_dot)
        if isinstance(interpolation, Failure):
            return interpolation
        return Success(InterpolatedMember(interpolation.value), interpolation.cursor)

    path: list[str] = []
    end = cursor
    while end.current == ".":
        segment = parse_atom(end.advance())
        if isinstance(segment, Failure):
            if not path:
                return segment
            break
        path.append(segment.value)
        end = segment.cursor
    return Success(MemberRef(tuple(path)), end)


def parse_argument(cursor: Cursor) -> ParseResult[Argument]:
    label = _parse_label(cursor)
    start = cursor
    name: str | None = None
    if label is not None:
        name, start = label

    value = parse_expression(start)
    if isinstance(value, Failure):
        return value
    return Success(Argument(value.value, name), value.cursor)


def _parse_label(cursor: Cursor) -> tuple[str, Cursor] | None:
    atom = parse_atom(cursor)
    if isinstance(atom, Failure):
        return None
    if atom.cursor.current != ":" or atom.cursor.peek() == ":":
        return None
    return atom.value, parse_whitespace(atom.cursor.advance()).cursor


def parse_arguments(cursor: Cursor) -> ParseResult[tuple[Argument, ...]]:
    """Parenthesised, comma separated argument list. Line breaks are allowed inside."""
    opened = parse_literal(cursor, "(")
    if isinstance(opened, Failure):
        return opened

    arguments: list[Argument] = []
    end = skip_trivia(opened.cursor)
    while True:
        if end.current == ")":
            return Success(tuple(arguments), end.advance())

        argument = parse_argument(end)
        if isinstance(argument, Failure):
            return argument
        arguments.append(argument.value)
        end = skip_trivia(argument.cursor)

        if end.current == ",":
            end = skip_trivia(end.advance())
            continue
        if end.current != ")":
            return expected(end, ",", ")")


def parse_invocation(cursor: Cursor) -> ParseResult[Invocation]:
    name = parse_atom(cursor)
    if isinstance(name, Failure):
        return name
    if is_identifier_char(name.cursor.current):
        return expected(name.cursor, "(")

    arguments = parse_arguments(name.cursor)
    if isinstance(arguments, Failure):
        return arguments
    return Success(Invocation(name.value, arguments.value), arguments.cursor)
