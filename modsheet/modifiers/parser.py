"""Per-modifier sub-parsers.

Each `ModifierParser` owns one modifier's grammar: it recognises its own name
in the `{name, ...}` header and validates the argument list against its
`ArgumentSpec`s. A name mismatch is a plain (generic) failure; a matched name
with a bad payload is a structural `ModifierParseError`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from modsheet.diagnostics import PARSER_EXPECTED_TOKEN
from modsheet.modifiers.errors import ModifierParseError
from modsheet.modifiers.metadata import parse_modifier_header
from modsheet.syntax.cursor import Cursor, Failure, ParseError, ParseResult, Success
from modsheet.syntax.expressions import parse_arguments
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
from modsheet.syntax.primitives import is_identifier_start, parse_whitespace


class SubParser(Protocol):
    """Anything the registry can try: a `ModifierParser` or another registry."""

    def parse(self, cursor: Cursor) -> ParseResult[Any]: ...


class ArgumentKind(StrEnum):
    MEMBER = "member"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    INVOCATION = "invocation"
    NIL = "nil"
    ANY = "any"


_KIND_TYPES: dict[ArgumentKind, tuple[type, ...]] = {
    ArgumentKind.MEMBER: (MemberRef, InterpolatedMember),
    ArgumentKind.NUMBER: (NumberLiteral,),
    ArgumentKind.STRING: (StringLiteral, InterpolatedString),
    ArgumentKind.BOOLEAN: (BooleanLiteral,),
    ArgumentKind.INVOCATION: (Invocation,),
    ArgumentKind.NIL: (NilLiteral,),
}


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """Expected shape of one argument position."""

    kinds: tuple[ArgumentKind, ...] = (ArgumentKind.ANY,)
    label: str | None = None
    choices: frozenset[str] | None = None
    optional: bool = False

    def describe(self) -> str:
        kinds = "|".join(kind.value for kind in self.kinds)
        return f"{self.label}: {kinds}" if self.label else kinds

    def reject_reason(self, value: Expression) -> str | None:
        """None when `value` fits this spec, else a short reason."""
        # Unresolved stylesheet templates are checked after substitution.
        if isinstance(value, Interpolation):
            return None
        if ArgumentKind.ANY not in self.kinds:
            allowed = tuple(t for kind in self.kinds for t in _KIND_TYPES[kind])
            if not isinstance(value, allowed):
                return f"expected {'|'.join(k.value for k in self.kinds)}, got {type(value).__name__}"
        if self.choices is not None and isinstance(value, MemberRef) and value.name not in self.choices:
            return f"`.{value.name}` is not one of {', '.join('.' + c for c in sorted(self.choices))}"
        return None


def member(*choices: str, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec((ArgumentKind.MEMBER,), label, frozenset(choices) if choices else None, optional)


def number(*, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec((ArgumentKind.NUMBER,), label, None, optional)


def string(*, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec((ArgumentKind.STRING,), label, None, optional)


def boolean(*, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec((ArgumentKind.BOOLEAN,), label, None, optional)


def any_of(*kinds: ArgumentKind, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec(tuple(kinds), label, None, optional)


def anything(*, label: str | None = None, optional: bool = False) -> ArgumentSpec:
    return ArgumentSpec((ArgumentKind.ANY,), label, None, optional)


@dataclass(frozen=True, slots=True)
class ModifierParser:
    """Sub-parser for one modifier.

    `build`, when given, turns the validated invocation into a custom value;
    a `ValueError` raised from it is reported as invalid arguments.
    """

    name: str
    arguments: tuple[ArgumentSpec, ...] = ()
    build: Callable[[Invocation], Any] | None = None

    def __post_init__(self):
        if not self.name or not is_identifier_start(self.name[0]):
            raise ValueError(f"Invalid modifier name: {self.name!r}")
        labels = [spec.label for spec in self.arguments if spec.label is not None]
        if len(labels) != len(set(labels)):
            raise ValueError(f"Duplicate argument labels in modifier {self.name!r}")

    def parse(self, cursor: Cursor) -> ParseResult[Any]:
        header = parse_modifier_header(cursor)
        if isinstance(header, Failure):
            return header

        name, metadata = header.value
        if name != self.name:
            return Failure(
                ParseError(
                    spec=PARSER_EXPECTED_TOKEN,
                    message=f"Expected modifier `{self.name}`, found `{name}`",
                    range=cursor.range_to(header.cursor),
                    expected=(self.name,),
                ),
                cursor,
                metadata,
            )

        payload_start = parse_whitespace(header.cursor).cursor
        if payload_start.current == "(":
            arguments = parse_arguments(payload_start)
            if isinstance(arguments, Failure):
                error = ModifierParseError.invalid_arguments(
                    name,
                    metadata,
                    arguments.error.range,
                    cause=arguments.error,
                )
                return Failure(error, arguments.cursor, metadata)
            values, end = arguments.value, arguments.cursor
        else:
            values, end = (), header.cursor

        reason = self.check_arguments(values)
        if reason is not None:
            error = ModifierParseError.invalid_arguments(
                name, metadata, cursor.range_to(end), reason=reason
            )
            return Failure(error, payload_start, metadata)

        invocation = Invocation(name, values, metadata)
        if self.build is None:
            return Success(invocation, end)
        try:
            built = self.build(invocation)
        except ValueError as exc:
            error = ModifierParseError.invalid_arguments(
                name, metadata, cursor.range_to(end), reason=str(exc)
            )
            return Failure(error, payload_start, metadata)
        return Success(built, end)

    def check_arguments(self, arguments: tuple[Argument, ...]) -> str | None:
        """Match arguments against the argument specs in order; None when they fit."""
        remaining = list(arguments)
        # First rejection of the current head argument by an optional spec.
        rejected: str | None = None
        for spec in self.arguments:
            if remaining and remaining[0].label == spec.label:
                reason = spec.reject_reason(remaining[0].value)
                if reason is None:
                    remaining.pop(0)
                    rejected = None
                    continue
                if not spec.optional:
                    return f"argument `{spec.describe()}`: {reason}"
                if rejected is None:
                    rejected = f"argument `{spec.describe()}`: {reason}"
                continue
            if not spec.optional:
                return f"missing argument `{spec.describe()}`"

        if remaining:
            if rejected is not None:
                return rejected
            extra = remaining[0]
            label = f"{extra.label}: " if extra.label else ""
            return f"unexpected argument `{label}{type(extra.value).__name__}`"
        return None
