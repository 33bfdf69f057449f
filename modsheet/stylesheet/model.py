"""Compiled stylesheet model: selector patterns, rules, and class-name matching."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from modsheet.errors import InterpolationError
from modsheet.stylesheet.resolve import Evaluator, resolve_invocation
from modsheet.syntax.nodes import Invocation
from modsheet.syntax.primitives import escape_string
from modsheet.text import TextRange


@dataclass(frozen=True, slots=True)
class SelectorPattern:
    """Literal class name, or a prefix whose remainder binds `variable`."""

    prefix: str
    variable: str | None = None

    @staticmethod
    def literal(text: str) -> "SelectorPattern":
        return SelectorPattern(text)

    @staticmethod
    def parametric(prefix: str, variable: str) -> "SelectorPattern":
        return SelectorPattern(prefix, variable)

    @property
    def is_literal(self) -> bool:
        return self.variable is None

    def match(self, class_name: str) -> Mapping[str, str] | None:
        """Bindings when `class_name` matches, else None."""
        if self.variable is None:
            return MappingProxyType({}) if class_name == self.prefix else None
        if not class_name.startswith(self.prefix):
            return None
        return MappingProxyType({self.variable: class_name[len(self.prefix) :]})

    def __str__(self) -> str:
        text = f'"{escape_string(self.prefix)}"'
        if self.variable is not None:
            text += f" <> {self.variable}"
        return text


@dataclass(frozen=True, slots=True)
class StyleRule:
    """One clause: a selector pattern and its ordered modifier templates."""

    selector: SelectorPattern
    modifiers: tuple[Invocation, ...]
    range: TextRange
    line: int


@dataclass(frozen=True, slots=True)
class RuleMatch:
    rule: StyleRule
    bindings: Mapping[str, str]

    def resolve(self, evaluate: Evaluator | None = None) -> tuple[Invocation, ...]:
        try:
            return tuple(resolve_invocation(modifier, self.bindings, evaluate) for modifier in self.rule.modifiers)
        except InterpolationError as exc:
            if exc.range is not None:
                raise
            raise InterpolationError(exc.message, exc.expression, self.rule.range) from exc


@dataclass(frozen=True, slots=True)
class Stylesheet:
    """Compiled stylesheet. Rules keep declaration order; the first match wins."""

    rules: tuple[StyleRule, ...]
    source_path: str | None = None

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[StyleRule]:
        return iter(self.rules)

    @property
    def selectors(self) -> tuple[SelectorPattern, ...]:
        return tuple(rule.selector for rule in self.rules)

    def to_mapping(self) -> Mapping[SelectorPattern, tuple[Invocation, ...]]:
        """Selector -> modifier templates; shadowed duplicates are left out."""
        mapping: dict[SelectorPattern, tuple[Invocation, ...]] = {}
        for rule in self.rules:
            mapping.setdefault(rule.selector, rule.modifiers)
        return MappingProxyType(mapping)

    def match(self, class_name: str) -> RuleMatch | None:
        for rule in self.rules:
            bindings = rule.selector.match(class_name)
            if bindings is not None:
                return RuleMatch(rule, bindings)
        return None

    def resolve(self, class_name: str, evaluate: Evaluator | None = None) -> tuple[Invocation, ...] | None:
        """Resolved modifiers for one class name, or None when no rule matches."""
        matched = self.match(class_name)
        if matched is None:
            return None
        return matched.resolve(evaluate)

    def resolve_classes(self, class_attribute: str, evaluate: Evaluator | None = None) -> tuple[Invocation, ...]:
        """Modifiers for a space separated class attribute, in class order."""
        resolved: list[Invocation] = []
        for class_name in class_attribute.split():
            modifiers = self.resolve(class_name, evaluate)
            if modifiers is not None:
                resolved.extend(modifiers)
        return tuple(resolved)
