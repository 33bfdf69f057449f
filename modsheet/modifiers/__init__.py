"""Modifier sub-parsers, the ordered registry, and inline modifier serialization."""

from modsheet.modifiers.builtin import BUILTIN_PARSERS, default_registry
from modsheet.modifiers.errors import ModifierErrorKind, ModifierParseError
from modsheet.modifiers.metadata import parse_metadata_fields, parse_modifier_header
from modsheet.modifiers.parser import (
    ArgumentKind,
    ArgumentSpec,
    ModifierParser,
    SubParser,
    any_of,
    anything,
    boolean,
    member,
    number,
    string,
)
from modsheet.modifiers.registry import ModifierParserRegistry
from modsheet.modifiers.serialize import dump_modifier, dump_modifiers, format_metadata
from modsheet.syntax.format import format_expression, format_invocation, format_number

__all__ = [
    "BUILTIN_PARSERS",
    "ArgumentKind",
    "ArgumentSpec",
    "ModifierErrorKind",
    "ModifierParseError",
    "ModifierParser",
    "ModifierParserRegistry",
    "SubParser",
    "any_of",
    "anything",
    "boolean",
    "default_registry",
    "dump_modifier",
    "dump_modifiers",
    "format_expression",
    "format_invocation",
    "format_metadata",
    "format_number",
    "member",
    "number",
    "parse_metadata_fields",
    "parse_modifier_header",
    "string",
]
