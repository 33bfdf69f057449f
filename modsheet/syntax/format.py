"""Print expressions and invocations back to stylesheet source."""

import math
from collections.abc import Iterable

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
from modsheet.syntax.primitives import escape_string


def format_number(value: int | float) -> str:
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers here")
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot serialize non-finite number {value!r}")
    text = repr(value)
    if "e" in text or "E" in text:
        text = f"{value:.20f}".rstrip("0")
        if text.endswith("."):
            text += "0"
    return text


def format_expression(expression: Expression) -> str:
    match expression:
        case MemberRef(path=path):
            return "." + ".".join(path)
        case InterpolatedMember(interpolation=interpolation):
            return "." + format_expression(interpolation)
        case Interpolation(expression=text):
            return "#{" + text + "}"
        case NumberLiteral(value=value):
            return format_number(value)
        case StringLiteral(value=value):
            return '"' + escape_string(value) + '"'
        case InterpolatedString(parts=parts):
            chunks = [
                format_expression(part) if isinstance(part, Interpolation) else escape_string(part)
                for part in parts
            ]
            return '"' + "".join(chunks) + '"'
        case BooleanLiteral(value=value):
            return "true" if value else "false"
        case NilLiteral():
            return "nil"
        case Invocation():
            return format_invocation(expression)
        case _:
            raise TypeError(f"Not an expression: {expression!r}")


def format_argument(argument: Argument) -> str:
    value = format_expression(argument.value)
    return f"{argument.label}: {value}" if argument.label else value


def format_arguments(arguments: Iterable[Argument]) -> str:
    return "(" + ", ".join(format_argument(arg) for arg in arguments) + ")"


def format_invocation(invocation: Invocation) -> str:
    """Stylesheet form, e.g. `frame(width: 10, height: 20)`."""
    return invocation.name + format_arguments(invocation.arguments)
