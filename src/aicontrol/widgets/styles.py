"""Inline style merging.

Color mutations replace only the color-related declarations of a widget's
inline style and keep everything else (sizing, padding, fonts) as it was.
"""

from typing import Final

COLOR_PROPERTIES: Final[frozenset[str]] = frozenset(
    {"background-color", "text-fill", "border-color"}
)


def parse_declarations(style: str | None) -> list[tuple[str, str]]:
    """Split an inline style into (property, value) pairs.

    Properties are lowercased and lose any ``-fx-`` prefix, so prefixed and
    bare spellings of a property are the same declaration. Empty and
    malformed fragments are dropped.
    """
    declarations: list[tuple[str, str]] = []
    if not style:
        return declarations
    for fragment in style.split(";"):
        prop, sep, value = fragment.partition(":")
        prop = prop.strip().lower().removeprefix("-fx-")
        if not sep or not prop:
            continue
        declarations.append((prop, value.strip()))
    return declarations


def join_declarations(declarations: list[tuple[str, str]]) -> str:
    """Render declarations back to ``prop: value;`` form."""
    return " ".join(f"{prop}: {value};" for prop, value in declarations)


def strip_properties(style: str | None, properties: frozenset[str]) -> list[tuple[str, str]]:
    """Declarations of a style whose property is not in ``properties``."""
    return [(p, v) for p, v in parse_declarations(style) if p not in properties]


def merge_background(style: str | None, background: str, text_fill: str | None = None) -> str:
    """Replace the color declarations of a style with a new background.

    Drops every background-color, text-fill and border-color declaration,
    prepends the new background (and text fill, when given) and keeps the
    remaining declarations in their original order.
    """
    head = [("background-color", background)]
    if text_fill is not None:
        head.append(("text-fill", text_fill))
    return join_declarations(head + strip_properties(style, COLOR_PROPERTIES))


def merge_foreground(style: str | None, text_fill: str) -> str:
    """Replace only the text-fill declaration of a style."""
    rest = strip_properties(style, frozenset({"text-fill"}))
    return join_declarations([("text-fill", text_fill)] + rest)


def style_value(style: str | None, prop: str) -> str | None:
    """Value of the last declaration of ``prop`` in a style, or None."""
    value = None
    for name, declared in parse_declarations(style):
        if name == prop:
            value = declared
    return value
