"""Stylesheet compiler configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompilerOptions:
    """Settings threaded through one compile.

    `source_line` is the line of `file` on which the stylesheet text starts,
    for stylesheets embedded in a larger source file.
    """

    annotations: bool = False
    file: str | None = None
    module: str | None = None
    source_line: int = 1

    def __post_init__(self):
        if self.source_line < 1:
            raise ValueError("source_line is 1-based")

    @staticmethod
    def for_file(
        file: str,
        *,
        module: str | None = None,
        source_line: int = 1,
        annotations: bool = True,
    ) -> "CompilerOptions":
        return CompilerOptions(
            annotations=annotations,
            file=file,
            module=module,
            source_line=source_line,
        )
