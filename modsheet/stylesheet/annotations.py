"""Source annotations attached to compiled modifiers."""

from __future__ import annotations

from dataclasses import dataclass

from modsheet.stylesheet.options import CompilerOptions
from modsheet.syntax.nodes import Metadata
from modsheet.text import LineIndex


@dataclass(frozen=True, slots=True)
class AnnotationContext:
    annotations: bool
    file: str | None
    module: str | None
    source_lines: tuple[str, ...]
    source_line: int = 1

    @staticmethod
    def from_source(text: str, options: CompilerOptions) -> "AnnotationContext":
        lines = LineIndex(text)
        return AnnotationContext(
            annotations=options.annotations,
            file=options.file,
            module=options.module,
            source_lines=tuple(lines.line_text(line) for line in range(1, lines.line_count + 1)),
            source_line=options.source_line,
        )


def context_to_annotation(context: AnnotationContext, line: int) -> Metadata:
    """Metadata for absolute `line`, or empty metadata when annotations are off."""
    if not context.annotations:
        return Metadata.empty()
    index = line - context.source_line
    source = context.source_lines[index] if 0 <= index < len(context.source_lines) else ""
    return Metadata(file=context.file, line=line, module=context.module, source=source.strip())
