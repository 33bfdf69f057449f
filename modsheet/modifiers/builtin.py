"""Sub-parsers for commonly used modifiers."""

from typing import Final

from modsheet.modifiers.parser import (
    ArgumentKind,
    ModifierParser,
    any_of,
    anything,
    boolean,
    member,
    number,
)
from modsheet.modifiers.registry import ModifierParserRegistry

EDGES: Final[tuple[str, ...]] = ("all", "top", "bottom", "leading", "trailing", "horizontal", "vertical")
ALIGNMENTS: Final[tuple[str, ...]] = (
    "center",
    "leading",
    "trailing",
    "top",
    "bottom",
    "topLeading",
    "topTrailing",
    "bottomLeading",
    "bottomTrailing",
)
FONT_WEIGHTS: Final[tuple[str, ...]] = (
    "ultraLight",
    "thin",
    "light",
    "regular",
    "medium",
    "semibold",
    "bold",
    "heavy",
    "black",
)
BUTTON_STYLES: Final[tuple[str, ...]] = ("automatic", "bordered", "borderedProminent", "borderless", "plain")

_STYLE = (ArgumentKind.MEMBER, ArgumentKind.INVOCATION)
_LENGTH = (ArgumentKind.NUMBER, ArgumentKind.MEMBER)

BUILTIN_PARSERS: Final[tuple[ModifierParser, ...]] = (
    ModifierParser("color", (any_of(*_STYLE),)),
    ModifierParser("foregroundStyle", (any_of(*_STYLE),)),
    ModifierParser("background", (anything(), member(*ALIGNMENTS, label="alignment", optional=True))),
    ModifierParser("font", (any_of(*_STYLE),)),
    ModifierParser("fontWeight", (member(*FONT_WEIGHTS),)),
    ModifierParser("padding", (member(*EDGES, optional=True), number(optional=True))),
    ModifierParser(
        "frame",
        (
            number(label="width", optional=True),
            number(label="height", optional=True),
            any_of(*_LENGTH, label="minWidth", optional=True),
            any_of(*_LENGTH, label="maxWidth", optional=True),
            any_of(*_LENGTH, label="minHeight", optional=True),
            any_of(*_LENGTH, label="maxHeight", optional=True),
            member(*ALIGNMENTS, label="alignment", optional=True),
        ),
    ),
    ModifierParser("width", (number(),)),
    ModifierParser("height", (number(),)),
    ModifierParser("opacity", (number(),)),
    ModifierParser("buttonStyle", (member(*BUTTON_STYLES),)),
    ModifierParser("cornerRadius", (number(),)),
    ModifierParser("offset", (number(label="x", optional=True), number(label="y", optional=True))),
    ModifierParser("hidden", (boolean(optional=True),)),
)


def default_registry() -> ModifierParserRegistry:
    return ModifierParserRegistry(BUILTIN_PARSERS)
