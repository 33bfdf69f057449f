"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from modsheet.text import LineIndex, TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the primitive parsers, registry and compiler."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self, source: str | None = None, *, file: str | None = None) -> str:
        """One-line human readable form, with line/column when the source is known."""
        location = f"{self.range.start.value}"
        if source is not None:
            line, column = LineIndex(source).line_col(self.range.start.value)
            location = f"{line}:{column}"
        if file is not None:
            location = f"{file}:{location}"
        text = f"{location}: {self.severity} {self.code}: {self.message}"
        if self.hint:
            text += f" ({self.hint})"
        return text
