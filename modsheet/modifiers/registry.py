"""Ordered composition of modifier sub-parsers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from modsheet.modifiers.errors import ModifierParseError
from modsheet.modifiers.metadata import parse_modifier_header
from modsheet.modifiers.parser import SubParser
from modsheet.syntax.cursor import Cursor, Failure, ParseError, ParseResult, Success
from modsheet.syntax.nodes import Metadata
from modsheet.syntax.primitives import skip_trivia

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ModifierParserRegistry:
    """Tries each sub-parser in declaration order against the same cursor.

    The first success wins. When every sub-parser fails, the result is the
    most recent structural error (a parser that matched the modifier name but
    rejected its arguments), or else a synthesized unknown-modifier error.
    Registries are themselves sub-parsers, so they nest.
    """

    parsers: tuple[SubParser, ...]

    def __post_init__(self):
        if not self.parsers:
            raise ValueError("A modifier registry needs at least one sub-parser")

    @staticmethod
    def build(*parsers: SubParser) -> "ModifierParserRegistry":
        return ModifierParserRegistry(tuple(parsers))

    def extend(self, *parsers: SubParser) -> "ModifierParserRegistry":
        """New registry trying this registry's parsers first, then `parsers`."""
        return ModifierParserRegistry(self.parsers + tuple(parsers))

    @property
    def names(self) -> tuple[str, ...]:
        names: list[str] = []
        for parser in self.parsers:
            if isinstance(parser, ModifierParserRegistry):
                names.extend(parser.names)
            else:
                name = getattr(parser, "name", None)
                if name is not None:
                    names.append(name)
        return tuple(names)

    def parse(self, cursor: Cursor) -> ParseResult[Any]:
        # Read the header on the side purely for error attribution.
        header = parse_modifier_header(cursor)
        if isinstance(header, Success):
            modifier_name, metadata = header.value
            header_error: ParseError | None = None
            header_end = header.cursor
        else:
            modifier_name, metadata = None, Metadata.empty()
            header_error = header.error if isinstance(header.error, ParseError) else None
            header_end = cursor

        structural: Failure | None = None
        for parser in self.parsers:
            result = parser.parse(cursor)
            if isinstance(result, Success):
                return result
            error = result.error
            if isinstance(error, ModifierParseError) and error.is_structural:
                logger.debug("modifier %s: structural failure: %s", modifier_name, error.message)
                structural = result

        if structural is not None:
            return structural

        if modifier_name is None:
            cause = header_error or ParseError.expected_at(cursor, "{")
            return Failure(ModifierParseError.malformed(cause), cursor, metadata)

        logger.debug("modifier %s: no sub-parser matched", modifier_name)
        error = ModifierParseError.unknown(modifier_name, metadata, cursor.range_to(header_end))
        return Failure(error, cursor, metadata)

    def parse_text(self, text: str) -> Any:
        """Parse exactly one inline modifier, raising `ModifierParseError`."""
        values = self._parse_sequence(text, single=True)
        return values[0]

    def parse_all(self, text: str) -> tuple[Any, ...]:
        """Parse a blank-separated sequence of inline modifiers."""
        return self._parse_sequence(text, single=False)

    def _parse_sequence(self, text: str, *, single: bool) -> tuple[Any, ...]:
        values: list[Any] = []
        cursor = skip_trivia(Cursor(text))
        while not cursor.is_eof:
            if single and values:
                raise ModifierParseError.malformed(ParseError.expected_at(cursor, "end of input"))
            result = self.parse(cursor)
            if isinstance(result, Failure):
                error = result.error
                if isinstance(error, ModifierParseError):
                    raise error
                raise ModifierParseError.malformed(error)
            values.append(result.value)
            cursor = skip_trivia(result.cursor)
            if cursor.current == ",":
                cursor = skip_trivia(cursor.advance())
        if single and not values:
            raise ModifierParseError.malformed(ParseError.expected_at(cursor, "{"))
        return tuple(values)
