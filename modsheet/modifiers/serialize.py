"""Serialize invocations to inline modifier text."""

from collections.abc import Iterable

from modsheet.syntax.format import format_arguments
from modsheet.syntax.nodes import Invocation, Metadata
from modsheet.syntax.primitives import escape_string


def format_metadata(metadata: Metadata) -> str:
    fields: list[str] = []
    for key, value in metadata.fields():
        if isinstance(value, int):
            fields.append(f"{key}: {value}")
        else:
            fields.append(f'{key}: "{escape_string(value)}"')
    return ", ".join(fields)


def dump_modifier(invocation: Invocation) -> str:
    """Inline modifier text, e.g. `{buttonStyle, file: "a.ex", line: 3}(.bordered)`."""
    header = invocation.name
    fields = format_metadata(invocation.metadata)
    if fields:
        header += ", " + fields
    return "{" + header + "}" + format_arguments(invocation.arguments)


def dump_modifiers(invocations: Iterable[Invocation]) -> str:
    return "\n".join(dump_modifier(invocation) for invocation in invocations)
