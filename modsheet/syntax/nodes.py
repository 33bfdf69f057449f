"""Value model for modifier invocations and their argument expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Metadata:
    """Diagnostic annotation carried beside a modifier. Never affects parsing."""

    file: str | None = None
    line: int | None = None
    module: str | None = None
    source: str | None = None

    @staticmethod
    def empty() -> "Metadata":
        return _EMPTY_METADATA

    @property
    def is_empty(self) -> bool:
        return self == _EMPTY_METADATA

    def fields(self) -> tuple[tuple[str, str | int], ...]:
        """Present fields in canonical (file, line, module, source) order."""
        pairs: list[tuple[str, str | int]] = []
        for key in ("file", "line", "module", "source"):
            value = getattr(self, key)
            if value is not None:
                pairs.append((key, value))
        return tuple(pairs)


_EMPTY_METADATA = Metadata()


@dataclass(frozen=True, slots=True)
class MemberRef:
    """Enum-like member reference: `.red`, `.title.bold`."""

    path: tuple[str, ...]

    @property
    def name(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True, slots=True)
class Interpolation:
    """`#{expression}` placeholder, resolved when a stylesheet rule is matched."""

    expression: str


@dataclass(frozen=True, slots=True)
class InterpolatedMember:
    """Member reference whose name is interpolated: `.#{style}`."""

    interpolation: Interpolation


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    value: int | float


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str


@dataclass(frozen=True, slots=True)
class InterpolatedString:
    """String literal containing `#{...}` segments."""

    parts: tuple[str | Interpolation, ...]


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    value: bool


@dataclass(frozen=True, slots=True)
class NilLiteral:
    pass


@dataclass(frozen=True, slots=True)
class Argument:
    """One (optionally labelled) argument of an invocation."""

    value: Expression
    label: str | None = None


@dataclass(frozen=True, slots=True)
class Invocation:
    """A named operation applied to ordered arguments.

    Top-level invocations are modifiers and carry `metadata`; nested ones
    (`font(system(size: 12))`) carry empty metadata.
    """

    name: str
    arguments: tuple[Argument, ...] = ()
    metadata: Metadata = _EMPTY_METADATA

    def positional(self) -> tuple[Expression, ...]:
        return tuple(arg.value for arg in self.arguments if arg.label is None)

    def labelled(self, label: str) -> Expression | None:
        for arg in self.arguments:
            if arg.label == label:
                return arg.value
        return None

    def with_metadata(self, metadata: Metadata) -> "Invocation":
        return Invocation(self.name, self.arguments, metadata)


Expression = Union[
    MemberRef,
    InterpolatedMember,
    Interpolation,
    NumberLiteral,
    StringLiteral,
    InterpolatedString,
    BooleanLiteral,
    NilLiteral,
    Invocation,
]

ModifierInvocation = Invocation


def is_template(expression: Expression) -> bool:
    """True when the expression (or anything nested in it) still needs interpolation."""
    match expression:
        case Interpolation() | InterpolatedMember() | InterpolatedString():
            return True
        case Invocation(arguments=arguments):
            return any(is_template(arg.value) for arg in arguments)
        case _:
            return False
