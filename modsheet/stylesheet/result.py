"""Compile result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from modsheet.diagnostics import STYLESHEET_INVALID_CLAUSE, Diagnostic, has_errors
from modsheet.errors import StylesheetCompileError
from modsheet.stylesheet.model import Stylesheet


@dataclass(frozen=True, slots=True)
class StylesheetCompileResult:
    """Outcome of one compile: a stylesheet, or none at all plus the diagnostics."""

    source_text: str
    stylesheet: Stylesheet | None
    diagnostics: tuple[Diagnostic, ...]
    source_path: str | None = None
    failed_selector: str | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == "warning")

    def unwrap(self) -> Stylesheet:
        """The stylesheet, or raise `StylesheetCompileError` for the failing clause."""
        if self.stylesheet is not None:
            return self.stylesheet
        clause = next(
            (d for d in self.diagnostics if d.code == STYLESHEET_INVALID_CLAUSE.code),
            None,
        )
        if clause is None:
            clause = next(d for d in self.diagnostics if d.severity == "error")
        raise StylesheetCompileError(
            clause.message,
            clause,
            selector=self.failed_selector,
            source_path=self.source_path,
        )
