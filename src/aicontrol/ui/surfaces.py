"""Textual implementations of the Widget Surface.

Hides how each Textual widget exposes visibility, text and picker values,
and how the toolkit-neutral inline style dialect maps onto Textual CSS:

- ``background-color`` becomes ``background``
- ``text-fill`` becomes ``color``
- ``border-color`` becomes a round ``border`` in that color
- ``-fx-`` prefixes are dropped, other properties pass through unchanged

Declarations Textual rejects are skipped one by one and reported through the
rejection callback; the stored dialect string is kept verbatim.
"""

from collections.abc import Callable, Iterable

from textual.css.errors import DeclarationError
from textual.css.tokenizer import TokenError
from textual.dom import DOMNode
from textual.widget import Widget
from textual.widgets import Button, Input, Static

from ..colors import Color
from ..widgets import DEFAULT_WIDGET_IDS, Capability, WidgetRegistry, WidgetSurface
from ..widgets.styles import parse_declarations
from .widgets import ColorPickerField

RejectionCallback = Callable[[str], None]

PROPERTY_MAP = {
    "background-color": "background",
    "text-fill": "color",
}

_BOX_CAPABILITIES = frozenset({Capability.VISIBILITY, Capability.BACKGROUND, Capability.STYLE})
_TEXT_CAPABILITIES = _BOX_CAPABILITIES | {Capability.TEXT, Capability.FOREGROUND}


def to_textual_declarations(style: str | None) -> list[str]:
    """Translate an inline style into individual Textual CSS declarations."""
    declarations = []
    for prop, value in parse_declarations(style):
        if prop == "border-color":
            declarations.append(f"border: round {value};")
        else:
            declarations.append(f"{PROPERTY_MAP.get(prop, prop)}: {value};")
    return declarations


class TextualSurface(WidgetSurface):
    """Any Textual widget: visibility, background and inline style."""

    CAPABILITIES: frozenset[Capability] = _BOX_CAPABILITIES

    def __init__(self, widget: Widget, on_rejected: RejectionCallback | None = None) -> None:
        self.widget = widget
        self._style = ""
        self._on_rejected = on_rejected

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self.CAPABILITIES

    def is_visible(self) -> bool:
        return bool(self.widget.display) and self.widget.visible

    def set_visible(self, visible: bool) -> None:
        self.widget.display = visible
        self.widget.visible = visible

    def get_style(self) -> str:
        return self._style

    def set_style(self, style: str) -> None:
        self._style = style
        display, visible = self.widget.display, self.widget.visible
        # Inline rules also carry display and visibility, restore them after reset
        self.widget.styles.reset()
        for declaration in to_textual_declarations(style):
            try:
                self.widget.set_styles(declaration)
            except (DeclarationError, TokenError) as e:
                if self._on_rejected is not None:
                    self._on_rejected(f"{self.widget.id}: skipped '{declaration}' ({e})")
        self.widget.display = display
        self.widget.visible = visible
        self.widget.refresh(layout=True)


class ButtonSurface(TextualSurface):
    CAPABILITIES = _TEXT_CAPABILITIES

    @property
    def label(self) -> str | None:
        return self.get_text() or None

    def get_text(self) -> str:
        return str(self.widget.label)

    def set_text(self, text: str) -> None:
        self.widget.label = text


class StaticSurface(TextualSurface):
    CAPABILITIES = _TEXT_CAPABILITIES

    @property
    def label(self) -> str | None:
        return self.get_text() or None

    def get_text(self) -> str:
        return str(self.widget.content)

    def set_text(self, text: str) -> None:
        self.widget.update(text)


class InputSurface(TextualSurface):
    CAPABILITIES = _TEXT_CAPABILITIES

    def get_text(self) -> str:
        return self.widget.value

    def set_text(self, text: str) -> None:
        self.widget.value = text


class PickerSurface(TextualSurface):
    CAPABILITIES = frozenset({Capability.VISIBILITY, Capability.STYLE, Capability.COLOR_PICKER})

    def get_picker_value(self) -> Color:
        return self.widget.value

    def set_picker_value(self, color: Color) -> None:
        self.widget.set_value(color)


# Checked in order, first match wins
SURFACE_TYPES: tuple[tuple[type[Widget], type[TextualSurface]], ...] = (
    (ColorPickerField, PickerSurface),
    (Button, ButtonSurface),
    (Input, InputSurface),
    (Static, StaticSurface),
)


def surface_for(widget: Widget, on_rejected: RejectionCallback | None = None) -> TextualSurface:
    """Wrap a Textual widget in the most specific surface for its type."""
    for widget_type, surface_type in SURFACE_TYPES:
        if isinstance(widget, widget_type):
            return surface_type(widget, on_rejected)
    return TextualSurface(widget, on_rejected)


def register_widgets(
    root: DOMNode,
    registry: WidgetRegistry,
    identifiers: Iterable[str] = DEFAULT_WIDGET_IDS,
    on_rejected: RejectionCallback | None = None,
) -> int:
    """Register the widgets found under ``root`` by id.

    Returns:
        Number of widgets registered
    """
    count = 0
    for widget_id in identifiers:
        widget = root.query_one(f"#{widget_id}", Widget)
        registry.register(widget_id, surface_for(widget, on_rejected))
        count += 1
    return count
