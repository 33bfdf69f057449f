"""Diagnostics."""

from modsheet.diagnostics.codes import (
    MODIFIER_INVALID_ARGUMENTS,
    MODIFIER_MALFORMED,
    MODIFIER_UNKNOWN,
    PARSER_EXPECTED_TOKEN,
    PARSER_INVALID_NUMBER,
    PARSER_UNTERMINATED_INTERPOLATION,
    PARSER_UNTERMINATED_STRING,
    STYLESHEET_DUPLICATE_SELECTOR,
    STYLESHEET_INVALID_CLAUSE,
    STYLESHEET_UNRESOLVED_INTERPOLATION,
    DiagnosticSpec,
)
from modsheet.diagnostics.diagnostic import Diagnostic, Severity
from modsheet.diagnostics.report import has_errors

__all__ = [
    "MODIFIER_INVALID_ARGUMENTS",
    "MODIFIER_MALFORMED",
    "MODIFIER_UNKNOWN",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_INVALID_NUMBER",
    "PARSER_UNTERMINATED_INTERPOLATION",
    "PARSER_UNTERMINATED_STRING",
    "STYLESHEET_DUPLICATE_SELECTOR",
    "STYLESHEET_INVALID_CLAUSE",
    "STYLESHEET_UNRESOLVED_INTERPOLATION",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
