"""Stylesheet compilation and class-name resolution."""

from modsheet.stylesheet.annotations import AnnotationContext, context_to_annotation
from modsheet.stylesheet.compiler import (
    compile_rules,
    compile_stylesheet,
    compile_stylesheet_result,
)
from modsheet.stylesheet.model import RuleMatch, SelectorPattern, StyleRule, Stylesheet
from modsheet.stylesheet.options import CompilerOptions
from modsheet.stylesheet.resolve import Evaluator, resolve_expression, resolve_invocation, to_number
from modsheet.stylesheet.result import StylesheetCompileResult

__all__ = [
    "AnnotationContext",
    "CompilerOptions",
    "Evaluator",
    "RuleMatch",
    "SelectorPattern",
    "StyleRule",
    "Stylesheet",
    "StylesheetCompileResult",
    "compile_rules",
    "compile_stylesheet",
    "compile_stylesheet_result",
    "context_to_annotation",
    "resolve_expression",
    "resolve_invocation",
    "to_number",
]
