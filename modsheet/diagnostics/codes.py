"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

from modsheet.diagnostics.diagnostic import Diagnostic
from modsheet.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(self, range: TextRange, *, message: str | None = None, hint: str | None = None) -> Diagnostic:
        """Build a Diagnostic for this spec, optionally overriding message/hint."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=self.severity,
            hint=hint if hint is not None else self.hint,
            category=self.category,
        )


PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote on the same line.",
    severity="error",
    category="parser",
)

PARSER_UNTERMINATED_INTERPOLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_INTERPOLATION",
    message="Unterminated interpolation.",
    hint="Close `#{` with a matching `}`.",
    severity="error",
    category="parser",
)

PARSER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_NUMBER",
    message="Invalid numeric literal.",
    hint="Numbers cannot carry a unit or identifier suffix; use a member like `.pt` as a separate argument.",
    severity="error",
    category="parser",
)

MODIFIER_MALFORMED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MODIFIER_MALFORMED",
    message="Malformed modifier. Expected `{name, metadata}` header.",
    severity="error",
    category="modifier",
)

MODIFIER_UNKNOWN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MODIFIER_UNKNOWN",
    message="Unknown modifier",
    hint="Register a sub-parser for this modifier or check its spelling.",
    severity="error",
    category="modifier",
)

MODIFIER_INVALID_ARGUMENTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="MODIFIER_INVALID_ARGUMENTS",
    message="Invalid arguments for modifier",
    severity="error",
    category="modifier",
)

STYLESHEET_INVALID_CLAUSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STYLESHEET_INVALID_CLAUSE",
    message="Invalid stylesheet clause.",
    hint='Clauses look like `"name" do ... end` or `"prefix-" <> var do ... end`.',
    severity="error",
    category="stylesheet",
)

STYLESHEET_DUPLICATE_SELECTOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STYLESHEET_DUPLICATE_SELECTOR",
    message="Duplicate selector; the earlier clause shadows this one.",
    hint="Merge the clauses or remove the later one.",
    severity="warning",
    category="stylesheet",
)

STYLESHEET_UNRESOLVED_INTERPOLATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="STYLESHEET_UNRESOLVED_INTERPOLATION",
    message="Interpolation is neither a bound pattern variable nor an evaluable expression.",
    severity="error",
    category="stylesheet",
)
