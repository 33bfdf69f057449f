"""Exception types raised by the modsheet entrypoints.

Inside the parsers failures travel as values; these are only raised at the
public boundary (`parse_text`, `compile_stylesheet`, `Stylesheet.resolve`).
"""

from __future__ import annotations

from modsheet.diagnostics import STYLESHEET_UNRESOLVED_INTERPOLATION, Diagnostic
from modsheet.text import ZERO, TextRange


class ModsheetError(Exception):
    """Base exception for all modsheet errors."""

    def __init__(self, message: str, diagnostic: Diagnostic | None = None):
        self.message = message
        self.diagnostic = diagnostic
        super().__init__(message)


class StylesheetCompileError(ModsheetError):
    """Raised when any clause of a stylesheet fails to compile.

    `selector` is the source form of the offending clause's selector when it
    could be read, otherwise None.
    """

    def __init__(
        self,
        message: str,
        diagnostic: Diagnostic | None = None,
        *,
        selector: str | None = None,
        source_path: str | None = None,
    ):
        self.selector = selector
        self.source_path = source_path
        super().__init__(message, diagnostic)


class InterpolationError(ModsheetError):
    """Raised at match time when an interpolation cannot be resolved.

    `range` is the span of the rule being resolved, when known.
    """

    def __init__(self, message: str, expression: str, range: TextRange | None = None):
        self.expression = expression
        self.range = range
        diagnostic = STYLESHEET_UNRESOLVED_INTERPOLATION.at(range or TextRange.empty(ZERO), message=message)
        super().__init__(message, diagnostic)
