"""Match-time substitution of pattern bindings into rule bodies."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from modsheet.errors import InterpolationError
from modsheet.syntax.cursor import Cursor, Success
from modsheet.syntax.nodes import (
    Argument,
    BooleanLiteral,
    Expression,
    InterpolatedMember,
    InterpolatedString,
    Interpolation,
    Invocation,
    MemberRef,
    NilLiteral,
    NumberLiteral,
    StringLiteral,
)
from modsheet.syntax.primitives import is_identifier_char, is_identifier_start, parse_number

Evaluator = Callable[[str, Mapping[str, str]], Any]
"""Embedding-application hook for interpolations that are not pattern variables."""

_EXPRESSION_TYPES = (
    MemberRef,
    NumberLiteral,
    StringLiteral,
    BooleanLiteral,
    NilLiteral,
    Invocation,
)


def to_number(text: str) -> int | float | str:
    """Integer or float when `text` is exactly a numeric literal, else `text`."""
    result = parse_number(Cursor(text))
    if isinstance(result, Success) and result.cursor.is_eof:
        return result.value
    return text


def resolve_invocation(
    invocation: Invocation,
    bindings: Mapping[str, str],
    evaluate: Evaluator | None = None,
) -> Invocation:
    arguments = tuple(
        Argument(resolve_expression(arg.value, bindings, evaluate), arg.label) for arg in invocation.arguments
    )
    return Invocation(invocation.name, arguments, invocation.metadata)


def resolve_expression(
    expression: Expression,
    bindings: Mapping[str, str],
    evaluate: Evaluator | None = None,
) -> Expression:
    match expression:
        case Interpolation():
            return _to_expression(_lookup(expression, bindings, evaluate))
        case InterpolatedMember(interpolation=interpolation):
            value = _lookup(interpolation, bindings, evaluate)
            return _to_member(str(value), interpolation)
        case InterpolatedString(parts=parts):
            chunks = [
                _to_text(_lookup(part, bindings, evaluate)) if isinstance(part, Interpolation) else part
                for part in parts
            ]
            return StringLiteral("".join(chunks))
        case Invocation():
            return resolve_invocation(expression, bindings, evaluate)
        case _:
            return expression


def _lookup(interpolation: Interpolation, bindings: Mapping[str, str], evaluate: Evaluator | None) -> Any:
    name = interpolation.expression
    if name in bindings:
        return bindings[name]
    if evaluate is None:
        raise InterpolationError(
            f"Interpolation `#{{{name}}}` is not a bound pattern variable and no evaluator was given",
            name,
        )
    return evaluate(name, bindings)


def _to_expression(value: Any) -> Expression:
    if isinstance(value, _EXPRESSION_TYPES):
        return value
    if value is None:
        return NilLiteral()
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, (int, float)):
        return NumberLiteral(value)
    coerced = to_number(str(value))
    if isinstance(coerced, str):
        return StringLiteral(coerced)
    return NumberLiteral(coerced)


def _to_text(value: Any) -> str:
    if isinstance(value, StringLiteral):
        return value.value
    return str(value)


def _to_member(text: str, interpolation: Interpolation) -> MemberRef:
    path = tuple(text.split("."))
    for segment in path:
        if not segment or not is_identifier_start(segment[0]) or not all(is_identifier_char(c) for c in segment):
            raise InterpolationError(
                f"`#{{{interpolation.expression}}}` resolved to {text!r}, which is not a member name",
                interpolation.expression,
            )
    return MemberRef(path)
