"""Stylesheet compiler.

    stylesheet := clause*
    clause     := selector "do" invocation* "end"
    selector   := string | string "<>" atom

`#` comments run to the end of the line. Compiling is all-or-nothing: the
first clause that fails aborts the compile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from modsheet.diagnostics import (
    STYLESHEET_DUPLICATE_SELECTOR,
    STYLESHEET_INVALID_CLAUSE,
    Diagnostic,
)
from modsheet.errors import StylesheetCompileError
from modsheet.stylesheet.annotations import AnnotationContext, context_to_annotation
from modsheet.stylesheet.model import SelectorPattern, StyleRule, Stylesheet
from modsheet.stylesheet.options import CompilerOptions
from modsheet.stylesheet.result import StylesheetCompileResult
from modsheet.syntax.cursor import Cursor, Failure, ParseResult, Success, expected
from modsheet.syntax.expressions import parse_invocation
from modsheet.syntax.nodes import Invocation
from modsheet.syntax.primitives import (
    at_line_end,
    parse_atom,
    parse_keyword,
    parse_literal,
    parse_plain_string,
    parse_whitespace,
    skip_inline_trivia,
    skip_trivia,
)
from modsheet.text import LineIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ClauseFailure:
    failure: Failure
    selector: SelectorPattern | None
    clause_start: Cursor


class _Compiler:
    def __init__(self, text: str, options: CompilerOptions) -> None:
        self._text = text
        self._options = options
        self._lines = LineIndex(text)
        self._context = AnnotationContext.from_source(text, options)

    def compile(self) -> StylesheetCompileResult:
        rules: list[StyleRule] = []
        warnings: list[Diagnostic] = []
        seen: dict[tuple[str, bool], StyleRule] = {}

        cursor = skip_trivia(Cursor(self._text))
        while not cursor.is_eof:
            clause = self._parse_clause(cursor)
            if isinstance(clause, _ClauseFailure):
                return self._failed(clause)

            rule = clause.value
            key = (rule.selector.prefix, rule.selector.is_literal)
            shadowing = seen.get(key)
            if shadowing is not None:
                warnings.append(
                    STYLESHEET_DUPLICATE_SELECTOR.at(
                        rule.range,
                        message=(
                            f"{STYLESHEET_DUPLICATE_SELECTOR.message} "
                            f"`{rule.selector}` already declared on line {shadowing.line}."
                        ),
                    )
                )
            else:
                seen[key] = rule
            rules.append(rule)
            cursor = skip_trivia(clause.cursor)

        logger.debug("compiled %d stylesheet rules from %s", len(rules), self._options.file or "<memory>")
        return StylesheetCompileResult(
            source_text=self._text,
            stylesheet=Stylesheet(tuple(rules), self._options.file),
            diagnostics=tuple(warnings),
            source_path=self._options.file,
        )

    def compile_rules(self) -> ParseResult[tuple[Invocation, ...]]:
        return self._parse_body(skip_trivia(Cursor(self._text)), terminator=None)

    def _parse_clause(self, cursor: Cursor) -> Success[StyleRule] | _ClauseFailure:
        selector = self._parse_selector(cursor)
        if isinstance(selector, Failure):
            return _ClauseFailure(selector, None, cursor)

        do = parse_keyword(parse_whitespace(selector.cursor).cursor, "do")
        if isinstance(do, Failure):
            return _ClauseFailure(do, selector.value, cursor)

        body = self._parse_body(do.cursor, terminator="end")
        if isinstance(body, Failure):
            return _ClauseFailure(body, selector.value, cursor)

        rule = StyleRule(
            selector=selector.value,
            modifiers=body.value,
            range=cursor.range_to(body.cursor),
            line=self._absolute_line(cursor),
        )
        return Success(rule, body.cursor)

    def _parse_selector(self, cursor: Cursor) -> ParseResult[SelectorPattern]:
        literal = parse_plain_string(cursor)
        if isinstance(literal, Failure):
            return literal

        after = parse_whitespace(literal.cursor).cursor
        concat = parse_literal(after, "<>")
        if isinstance(concat, Failure):
            return Success(SelectorPattern.literal(literal.value), literal.cursor)

        variable = parse_atom(parse_whitespace(concat.cursor).cursor)
        if isinstance(variable, Failure):
            return variable
        return Success(SelectorPattern.parametric(literal.value, variable.value), variable.cursor)

    def _parse_body(self, cursor: Cursor, *, terminator: str | None) -> ParseResult[tuple[Invocation, ...]]:
        modifiers: list[Invocation] = []
        end = skip_trivia(cursor)
        while True:
            if terminator is not None:
                closed = parse_keyword(end, terminator)
                if isinstance(closed, Success):
                    return Success(tuple(modifiers), closed.cursor)
                if end.is_eof:
                    return expected(end, terminator)
            elif end.is_eof:
                return Success(tuple(modifiers), end)

            invocation = parse_invocation(end)
            if isinstance(invocation, Failure):
                return invocation
            metadata = context_to_annotation(self._context, self._absolute_line(end))
            modifiers.append(invocation.value.with_metadata(metadata))

            after = skip_inline_trivia(invocation.cursor)
            at_terminator = terminator is not None and isinstance(parse_keyword(after, terminator), Success)
            if not at_line_end(after) and not at_terminator:
                return expected(after, "line break")
            end = skip_trivia(after)

    def _absolute_line(self, cursor: Cursor) -> int:
        return self._options.source_line + self._lines.line_of(cursor.offset) - 1

    def _failed(self, clause: _ClauseFailure) -> StylesheetCompileResult:
        cause = clause.failure.to_diagnostic()
        selector = str(clause.selector) if clause.selector is not None else None
        line, column = self._lines.line_col(cause.range.start.value)
        where = f"clause {selector}" if selector is not None else "clause"
        message = f"Invalid {where} at line {line}, column {column}: {cause.message}"
        clause_diagnostic = STYLESHEET_INVALID_CLAUSE.at(
            clause.clause_start.range_to(clause.failure.cursor),
            message=message,
        )
        logger.debug("stylesheet compile aborted: %s", message)
        return StylesheetCompileResult(
            source_text=self._text,
            stylesheet=None,
            diagnostics=(cause, clause_diagnostic),
            source_path=self._options.file,
            failed_selector=selector,
        )


def compile_stylesheet_result(text: str, options: CompilerOptions | None = None) -> StylesheetCompileResult:
    """Compile without raising; failures are reported through diagnostics."""
    return _Compiler(text, options or CompilerOptions()).compile()


def compile_stylesheet(text: str, options: CompilerOptions | None = None) -> Stylesheet:
    """Compile a stylesheet or raise `StylesheetCompileError`."""
    return compile_stylesheet_result(text, options).unwrap()


def compile_rules(text: str, options: CompilerOptions | None = None) -> tuple[Invocation, ...]:
    """Compile a bare modifier list (a clause body without the clause)."""
    result = _Compiler(text, options or CompilerOptions()).compile_rules()
    if isinstance(result, Failure):
        cause = result.to_diagnostic()
        raise StylesheetCompileError(
            f"Invalid rules: {cause.message}",
            cause,
            source_path=options.file if options is not None else None,
        )
    return result.value
