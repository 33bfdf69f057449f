"""Cursor, result types, primitive parsers and the argument-expression grammar."""

from modsheet.syntax.cursor import (
    Cursor,
    Failure,
    ParseError,
    ParseResult,
    Success,
    expected,
    fail,
)
from modsheet.syntax.expressions import (
    parse_argument,
    parse_arguments,
    parse_expression,
    parse_invocation,
)
from modsheet.syntax.format import format_argument, format_expression, format_invocation, format_number
from modsheet.syntax.nodes import (
    Argument,
    BooleanLiteral,
    Expression,
    InterpolatedMember,
    InterpolatedString,
    Interpolation,
    Invocation,
    MemberRef,
    Metadata,
    ModifierInvocation,
    NilLiteral,
    NumberLiteral,
    StringLiteral,
    is_template,
)
from modsheet.syntax.primitives import (
    parse_atom,
    parse_blank,
    parse_interpolation,
    parse_keyword,
    parse_literal,
    parse_number,
    parse_plain_string,
    parse_string,
    parse_whitespace,
    skip_comment,
    skip_trivia,
)

__all__ = [
    "Argument",
    "BooleanLiteral",
    "Cursor",
    "Expression",
    "Failure",
    "InterpolatedMember",
    "InterpolatedString",
    "Interpolation",
    "Invocation",
    "MemberRef",
    "Metadata",
    "ModifierInvocation",
    "NilLiteral",
    "NumberLiteral",
    "ParseError",
    "ParseResult",
    "StringLiteral",
    "Success",
    "expected",
    "fail",
    "format_argument",
    "format_expression",
    "format_invocation",
    "format_number",
    "is_template",
    "parse_argument",
    "parse_arguments",
    "parse_atom",
    "parse_blank",
    "parse_expression",
    "parse_interpolation",
    "parse_invocation",
    "parse_keyword",
    "parse_literal",
    "parse_number",
    "parse_plain_string",
    "parse_string",
    "parse_whitespace",
    "skip_comment",
    "skip_trivia",
]
