from dataclasses import dataclass

import pytest

from modsheet.modifiers import (
    ArgumentKind,
    ModifierErrorKind,
    ModifierParseError,
    ModifierParser,
    any_of,
    member,
    number,
)
from modsheet.syntax import (
    Argument,
    Cursor,
    Failure,
    Invocation,
    MemberRef,
    Metadata,
    NumberLiteral,
    ParseError,
    Success,
)

PADDING = ModifierParser("padding", (member("all", "horizontal", "vertical", optional=True), number(optional=True)))
FRAME = ModifierParser(
    "frame",
    (
        number(label="width", optional=True),
        number(label="height", optional=True),
        member("center", "leading", label="alignment", optional=True),
    ),
)


def _parse(parser: ModifierParser, text: str):
    return parser.parse(Cursor(text))


def test_matching_name_and_arguments() -> None:
    result = _parse(PADDING, "{padding, line: 2}(.horizontal, 8)")

    assert isinstance(result, Success)
    assert result.value == Invocation(
        "padding",
        (Argument(MemberRef(("horizontal",))), Argument(NumberLiteral(8))),
        Metadata(line=2),
    )


@pytest.mark.parametrize("text", ["{padding}()", "{padding}", "{padding}(8)", "{padding}(.all)"])
def test_optional_arguments_may_be_left_out(text: str) -> None:
    assert isinstance(_parse(PADDING, text), Success)


def test_labelled_arguments_skip_missing_optionals() -> None:
    result = _parse(FRAME, "{frame}(height: 20, alignment: .leading)")

    assert isinstance(result, Success)
    assert result.value.labelled("height") == NumberLiteral(20)
    assert result.value.labelled("width") is None


def test_other_modifier_name_is_a_generic_failure() -> None:
    result = _parse(PADDING, "{frame}(width: 10)")

    assert isinstance(result, Failure)
    assert isinstance(result.error, ParseError)
    assert "padding" in result.error.message


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("{padding}(.diagonal)", "not one of"),
        ("{padding}(8, 9)", "unexpected argument"),
        ("{frame}(depth: 3)", "unexpected argument"),
        ("{frame}(width: .wide)", "expected number"),
    ],
)
def test_name_match_with_bad_arguments_is_structural(text: str, reason: str) -> None:
    parser = PADDING if text.startswith("{padding") else FRAME
    result = _parse(parser, text)

    assert isinstance(result, Failure)
    error = result.error
    assert isinstance(error, ModifierParseError)
    assert error.kind == ModifierErrorKind.INVALID_ARGUMENTS
    assert error.is_structural
    assert error.modifier_name == parser.name
    assert reason in error.message


def test_malformed_payload_is_structural_with_cause() -> None:
    result = _parse(PADDING, '{padding, file: "a.ex", line: 9}(8px)')

    assert isinstance(result, Failure)
    error = result.error
    assert isinstance(error, ModifierParseError)
    assert error.is_structural
    assert error.cause is not None
    assert error.cause.spec.code == "PARSER_INVALID_NUMBER"
    assert error.metadata == Metadata(file="a.ex", line=9)
    assert "(a.ex:9)" in str(error)


def test_required_argument_missing() -> None:
    opacity = ModifierParser("opacity", (number(),))
    result = _parse(opacity, "{opacity}()")

    assert isinstance(result, Failure)
    assert "missing argument `number`" in result.error.message


def test_interpolations_pass_validation() -> None:
    opacity = ModifierParser("opacity", (number(),))

    assert isinstance(_parse(opacity, "{opacity}(#{level})"), Success)


@dataclass(frozen=True)
class Opacity:
    value: float


def _build_opacity(invocation: Invocation) -> Opacity:
    (value,) = invocation.positional()
    if not 0 <= value.value <= 1:
        raise ValueError("opacity must be within 0...1")
    return Opacity(float(value.value))


def test_build_hook_produces_typed_values() -> None:
    opacity = ModifierParser("opacity", (number(),), build=_build_opacity)

    result = _parse(opacity, "{opacity}(0.25)")
    assert isinstance(result, Success)
    assert result.value == Opacity(0.25)

    rejected = _parse(opacity, "{opacity}(3)")
    assert isinstance(rejected, Failure)
    assert rejected.error.is_structural
    assert "0...1" in rejected.error.message


def test_any_of_spec_describes_all_kinds() -> None:
    spec = any_of(ArgumentKind.NUMBER, ArgumentKind.MEMBER, label="maxWidth")

    assert spec.describe() == "maxWidth: number|member"


def test_construction_is_validated() -> None:
    with pytest.raises(ValueError):
        ModifierParser("1bad")
    with pytest.raises(ValueError):
        ModifierParser("frame", (number(label="width"), number(label="width")))
