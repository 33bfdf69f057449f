import pytest

from modsheet import InterpolationError, StylesheetCompileError
from modsheet.stylesheet import (
    CompilerOptions,
    SelectorPattern,
    compile_rules,
    compile_stylesheet,
    compile_stylesheet_result,
)
from modsheet.syntax import (
    Argument,
    BooleanLiteral,
    Invocation,
    MemberRef,
    Metadata,
    NumberLiteral,
    StringLiteral,
    format_invocation,
)

from tests._shared_cases import LAYOUT_SHEET, MOCK_SHEET, TWO_CLAUSE_SHEET


def _call(name: str, *values, **labelled) -> Invocation:
    arguments = tuple(Argument(value) for value in values)
    arguments += tuple(Argument(value, label) for label, value in labelled.items())
    return Invocation(name, arguments)


def _member(name: str) -> MemberRef:
    return MemberRef(tuple(name.split(".")))


def test_two_clause_sheet() -> None:
    stylesheet = compile_stylesheet(TWO_CLAUSE_SHEET)

    assert stylesheet.selectors == (
        SelectorPattern.literal("color-red"),
        SelectorPattern.parametric("h-", "height"),
    )
    assert stylesheet.resolve("color-red") == (_call("color", _member("red")),)
    assert stylesheet.resolve("h-42") == (_call("height", NumberLiteral(42)),)
    assert stylesheet.resolve("w-42") is None


def test_comments_are_discarded() -> None:
    stylesheet = compile_stylesheet(MOCK_SHEET)

    assert len(stylesheet) == 3
    assert [len(rule.modifiers) for rule in stylesheet] == [1, 1, 1]
    assert stylesheet.resolve("button-primary") == (_call("buttonStyle", _member("primary")),)


def test_float_and_text_bindings_are_coerced() -> None:
    stylesheet = compile_stylesheet(MOCK_SHEET)

    assert stylesheet.resolve("h-12.5") == (_call("height", NumberLiteral(12.5)),)
    assert stylesheet.resolve("h-auto") == (_call("height", StringLiteral("auto")),)


def test_empty_remainder_binds_empty_string() -> None:
    stylesheet = compile_stylesheet(TWO_CLAUSE_SHEET)

    matched = stylesheet.match("h-")
    assert matched is not None
    assert dict(matched.bindings) == {"height": ""}


def test_first_matching_rule_wins() -> None:
    stylesheet = compile_stylesheet(
        """
        "h-" <> height do
          height(#{height})
        end
        "h-1" do
          height(100)
        end
        """
    )

    assert stylesheet.resolve("h-1") == (_call("height", NumberLiteral(1)),)


def test_layout_rules() -> None:
    stylesheet = compile_stylesheet(LAYOUT_SHEET)

    assert stylesheet.resolve("card") == (
        _call("padding", _member("horizontal"), NumberLiteral(8)),
        _call("frame", width=NumberLiteral(100), height=NumberLiteral(50), alignment=_member("leading")),
        _call("background", _member("ultraThinMaterial")),
        _call("cornerRadius", NumberLiteral(12)),
    )
    title = stylesheet.resolve("title-18")
    assert [format_invocation(modifier) for modifier in title] == [
        "font(system(size: 18, weight: .bold))",
        "foregroundStyle(.primary)",
    ]
    assert stylesheet.resolve("label-Hello") == (_call("accessibilityLabel", StringLiteral("Label: Hello")),)


def test_resolve_classes_concatenates_in_class_order() -> None:
    stylesheet = compile_stylesheet(MOCK_SHEET)

    resolved = stylesheet.resolve_classes("h-10 unknown  color-red button-plain")

    assert [format_invocation(modifier) for modifier in resolved] == [
        "height(10)",
        "color(.red)",
        "buttonStyle(.plain)",
    ]


def test_unbound_interpolation_needs_an_evaluator() -> None:
    stylesheet = compile_stylesheet(
        """
        "fade" do
          opacity(#{level})
          hidden(#{collapsed})
        end
        """
    )

    with pytest.raises(InterpolationError) as exc_info:
        stylesheet.resolve("fade")
    assert exc_info.value.expression == "level"
    assert exc_info.value.diagnostic is not None
    assert exc_info.value.diagnostic.code == "STYLESHEET_UNRESOLVED_INTERPOLATION"
    assert exc_info.value.range == stylesheet.rules[0].range

    values = {"level": 0.5, "collapsed": False}
    resolved = stylesheet.resolve("fade", lambda expression, bindings: values[expression])
    assert resolved == (
        _call("opacity", NumberLiteral(0.5)),
        _call("hidden", BooleanLiteral(False)),
    )


def test_interpolated_member_must_resolve_to_a_name() -> None:
    stylesheet = compile_stylesheet(MOCK_SHEET)

    with pytest.raises(InterpolationError):
        stylesheet.resolve("button-1st")


def test_single_line_clause() -> None:
    stylesheet = compile_stylesheet('"dim" do opacity(0.5) end')

    assert stylesheet.resolve("dim") == (_call("opacity", NumberLiteral(0.5)),)


def test_bad_clause_aborts_the_whole_compile() -> None:
    text = '"a" do\n  color(.red)\nend\n"b" do\n  color(.red\nend\n'

    with pytest.raises(StylesheetCompileError) as exc_info:
        compile_stylesheet(text)

    error = exc_info.value
    assert error.selector == '"b"'
    assert error.diagnostic is not None
    assert error.diagnostic.code == "STYLESHEET_INVALID_CLAUSE"
    assert error.message.startswith('Invalid clause "b" at line 6, column 1:')


@pytest.mark.parametrize(
    ("text", "selector"),
    [
        ('"a" color(.red) end', '"a"'),
        ('"a" do\n  color(.red)\n', '"a"'),
        ('"a" do\n  color(.red) opacity(1)\nend', '"a"'),
        ('"a" <> 1x do\n  color(.red)\nend', None),
        ('"a do\n  color(.red)\nend', None),
        ("a do\n  color(.red)\nend", None),
    ],
)
def test_invalid_clauses(text: str, selector: str | None) -> None:
    result = compile_stylesheet_result(text)

    assert result.stylesheet is None
    assert result.has_errors
    assert result.failed_selector == selector
    with pytest.raises(StylesheetCompileError):
        result.unwrap()


def test_duplicate_selector_warns_and_first_declaration_wins() -> None:
    result = compile_stylesheet_result(
        """
        "color-red" do
          color(.red)
        end
        "color-red" do
          color(.crimson)
        end
        """
    )

    assert not result.has_errors
    (warning,) = result.warnings
    assert warning.code == "STYLESHEET_DUPLICATE_SELECTOR"
    assert "line 2" in warning.message

    stylesheet = result.unwrap()
    assert len(stylesheet) == 2
    assert stylesheet.resolve("color-red") == (_call("color", _member("red")),)
    assert stylesheet.to_mapping()[SelectorPattern.literal("color-red")] == (_call("color", _member("red")),)


def test_annotations_attach_source_metadata() -> None:
    options = CompilerOptions.for_file("lib/my_app/sheet.ex", module="MyApp.Sheet", source_line=10)
    stylesheet = compile_stylesheet(TWO_CLAUSE_SHEET, options)

    (color,) = stylesheet.resolve("color-red")
    assert color.metadata == Metadata(
        file="lib/my_app/sheet.ex",
        line=11,
        module="MyApp.Sheet",
        source="color(.red)",
    )
    (height,) = stylesheet.resolve("h-3")
    assert height.metadata.line == 14
    assert height.metadata.source == "height(#{height})"
    assert stylesheet.source_path == "lib/my_app/sheet.ex"


def test_annotations_off_by_default() -> None:
    stylesheet = compile_stylesheet(TWO_CLAUSE_SHEET)

    assert all(modifier.metadata.is_empty for rule in stylesheet for modifier in rule.modifiers)


def test_compile_rules() -> None:
    modifiers = compile_rules("padding(.all, 4)\n# spacing\nopacity(0.5)\n")

    assert [format_invocation(modifier) for modifier in modifiers] == ["padding(.all, 4)", "opacity(0.5)"]
    assert compile_rules("") == ()

    with pytest.raises(StylesheetCompileError):
        compile_rules("padding(.all")


def test_annotation_lines_follow_parser_line_breaks() -> None:
    options = CompilerOptions.for_file("a.ex")

    separated = compile_stylesheet('# note\u2028more\n"color-red" do\n  color(.red)\nend\n', options)
    (color,) = separated.resolve("color-red")
    assert color.metadata == Metadata(file="a.ex", line=3, source="color(.red)")

    carriage_returns = compile_stylesheet('"a" do\r  color(.red)\r  opacity(1)\rend\r', options)
    modifiers = carriage_returns.resolve("a")
    assert [modifier.metadata.line for modifier in modifiers] == [2, 3]
    assert [modifier.metadata.source for modifier in modifiers] == ["color(.red)", "opacity(1)"]
