"""Parser and compiler for view-modifier stylesheets and inline modifier text."""

from modsheet.errors import InterpolationError, ModsheetError, StylesheetCompileError
from modsheet.modifiers import (
    ModifierErrorKind,
    ModifierParseError,
    ModifierParser,
    ModifierParserRegistry,
    default_registry,
    dump_modifier,
)
from modsheet.stylesheet import (
    CompilerOptions,
    Stylesheet,
    compile_rules,
    compile_stylesheet,
    compile_stylesheet_result,
)
from modsheet.syntax import Cursor, Invocation, Metadata

__all__ = [
    "CompilerOptions",
    "Cursor",
    "InterpolationError",
    "Invocation",
    "Metadata",
    "ModifierErrorKind",
    "ModifierParseError",
    "ModifierParser",
    "ModifierParserRegistry",
    "ModsheetError",
    "Stylesheet",
    "StylesheetCompileError",
    "compile_rules",
    "compile_stylesheet",
    "compile_stylesheet_result",
    "default_registry",
    "dump_modifier",
]
