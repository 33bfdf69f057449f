"""Value-semantics cursor and the explicit parse result type.

A `Cursor` never mutates: advancing returns a new cursor, so a parser that
wants to try an alternative simply keeps the cursor it started from. Parsers
return `Success` or `Failure` instead of raising, which keeps backtracking a
plain branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, TypeVar, Union

from modsheet.diagnostics import PARSER_EXPECTED_TOKEN, Diagnostic, DiagnosticSpec
from modsheet.text import TextRange, TextSize

if TYPE_CHECKING:
    from modsheet.modifiers.errors import ModifierParseError
    from modsheet.syntax.nodes import Metadata

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position over a source text."""

    source: str
    offset: int = 0

    def __post_init__(self):
        if self.offset < 0 or self.offset > len(self.source):
            raise ValueError(f"Cursor offset {self.offset} outside source of length {len(self.source)}")

    @property
    def is_eof(self) -> bool:
        return self.offset >= len(self.source)

    @property
    def current(self) -> str:
        if self.is_eof:
            return "\0"
        return self.source[self.offset]

    @property
    def position(self) -> TextSize:
        return TextSize.from_int(self.offset)

    @property
    def rest(self) -> str:
        return self.source[self.offset :]

    def peek(self, ahead: int = 1) -> str:
        index = self.offset + ahead
        if index >= len(self.source):
            return "\0"
        return self.source[index]

    def startswith(self, text: str) -> bool:
        return self.source.startswith(text, self.offset)

    def advance(self, steps: int = 1) -> "Cursor":
        return Cursor(self.source, min(self.offset + steps, len(self.source)))

    def range_to(self, other: "Cursor") -> TextRange:
        """Range from this cursor up to (not including) `other`."""
        return TextRange.from_offsets(self.offset, other.offset)

    def text_to(self, other: "Cursor") -> str:
        return self.source[self.offset : other.offset]

    def __repr__(self) -> str:
        return f"Cursor({self.offset}, {self.rest[:16]!r})"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Generic (not modifier-specific) parse failure."""

    spec: DiagnosticSpec
    message: str
    range: TextRange
    expected: tuple[str, ...] = ()

    @staticmethod
    def expected_at(cursor: Cursor, *expected: str) -> "ParseError":
        found = "end of input" if cursor.is_eof else repr(cursor.current)
        wanted = " or ".join(f"`{e}`" for e in expected)
        return ParseError(
            spec=PARSER_EXPECTED_TOKEN,
            message=f"Expected {wanted}, found {found}",
            range=TextRange.empty(cursor.position),
            expected=tuple(expected),
        )

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> "ParseError":
        return ParseError(spec=spec, message=message or spec.message, range=range)

    @property
    def offset(self) -> int:
        return self.range.start.value

    def to_diagnostic(self) -> Diagnostic:
        return self.spec.at(self.range, message=self.message)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Parsed `value`; `cursor` points just past the consumed input."""

    value: T
    cursor: Cursor

    @property
    def ok(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed attempt.

    `cursor` is where the failure was detected, for diagnostics only. The
    cursor the attempt started from is untouched, so callers retry siblings
    from it directly.
    """

    error: ParseError | ModifierParseError
    cursor: Cursor
    metadata: Metadata | None = None

    @property
    def ok(self) -> Literal[False]:
        return False

    def to_diagnostic(self) -> Diagnostic:
        return self.error.to_diagnostic()


ParseResult = Union[Success[T], Failure]


def expected(cursor: Cursor, *tokens: str) -> Failure:
    return Failure(ParseError.expected_at(cursor, *tokens), cursor)


def fail(spec: DiagnosticSpec, start: Cursor, end: Cursor | None = None, message: str | None = None) -> Failure:
    """Failure for `spec` covering start..end (empty range at `start` when end is None)."""
    range = start.range_to(end) if end is not None else TextRange.empty(start.position)
    return Failure(ParseError.from_spec(spec, range, message), start)
