"""Modifier parse errors."""

from __future__ import annotations

from enum import StrEnum

from modsheet.diagnostics import (
    MODIFIER_INVALID_ARGUMENTS,
    MODIFIER_MALFORMED,
    MODIFIER_UNKNOWN,
    Diagnostic,
)
from modsheet.errors import ModsheetError
from modsheet.syntax.cursor import ParseError
from modsheet.syntax.nodes import Metadata
from modsheet.text import TextRange


class ModifierErrorKind(StrEnum):
    UNKNOWN_MODIFIER = "unknown_modifier"
    INVALID_ARGUMENTS = "invalid_arguments"
    MALFORMED_MODIFIER = "malformed_modifier"


class ModifierParseError(ModsheetError):
    """Failure attributed to one modifier.

    Travels as a `Failure` payload inside the registry and is raised by the
    `parse_text`/`parse_all` entrypoints.
    """

    def __init__(
        self,
        kind: ModifierErrorKind,
        modifier_name: str | None,
        metadata: Metadata,
        range: TextRange,
        *,
        cause: ParseError | None = None,
        reason: str | None = None,
    ):
        self.kind = kind
        self.modifier_name = modifier_name
        self.metadata = metadata
        self.range = range
        self.cause = cause
        self.reason = reason
        super().__init__(self._format_message(), self.to_diagnostic())

    @staticmethod
    def unknown(name: str, metadata: Metadata, range: TextRange) -> "ModifierParseError":
        return ModifierParseError(ModifierErrorKind.UNKNOWN_MODIFIER, name, metadata, range)

    @staticmethod
    def invalid_arguments(
        name: str,
        metadata: Metadata,
        range: TextRange,
        *,
        cause: ParseError | None = None,
        reason: str | None = None,
    ) -> "ModifierParseError":
        return ModifierParseError(
            ModifierErrorKind.INVALID_ARGUMENTS,
            name,
            metadata,
            range,
            cause=cause,
            reason=reason,
        )

    @staticmethod
    def malformed(cause: ParseError) -> "ModifierParseError":
        return ModifierParseError(
            ModifierErrorKind.MALFORMED_MODIFIER,
            None,
            Metadata.empty(),
            cause.range,
            cause=cause,
        )

    @property
    def is_structural(self) -> bool:
        """A parser matched the modifier name but its payload was invalid."""
        return self.kind == ModifierErrorKind.INVALID_ARGUMENTS

    def _format_message(self) -> str:
        match self.kind:
            case ModifierErrorKind.UNKNOWN_MODIFIER:
                message = f"Unknown modifier `{self.modifier_name}`"
            case ModifierErrorKind.INVALID_ARGUMENTS:
                message = f"Invalid arguments for modifier `{self.modifier_name}`"
                detail = self.reason or (self.cause.message if self.cause is not None else None)
                if detail:
                    message += f": {detail}"
            case _:
                message = MODIFIER_MALFORMED.message
                if self.cause is not None:
                    message += f" {self.cause.message}"
        if self.metadata.file is not None and self.metadata.line is not None:
            message += f" ({self.metadata.file}:{self.metadata.line})"
        return message

    def to_diagnostic(self) -> Diagnostic:
        spec = {
            ModifierErrorKind.UNKNOWN_MODIFIER: MODIFIER_UNKNOWN,
            ModifierErrorKind.INVALID_ARGUMENTS: MODIFIER_INVALID_ARGUMENTS,
            ModifierErrorKind.MALFORMED_MODIFIER: MODIFIER_MALFORMED,
        }[self.kind]
        return spec.at(self.range, message=self._format_message())

    def __repr__(self) -> str:
        return f"ModifierParseError({self.kind.value}, {self.modifier_name!r})"
