"""Widget mutations.

Applies typed mutations to registered widgets through their surfaces. Each
successful mutation returns the transcript notice describing it; expected
failures raise WidgetNotFoundError or CapabilityError. Toolkit exceptions are
not caught here.
"""

from collections.abc import Callable

from ..colors import Color, display_name
from ..errors import CapabilityError
from .base import CAPABILITY_LABELS, Capability
from .registry import WidgetHandle, WidgetRegistry
from .styles import merge_background, merge_foreground

# Called with (color, source) whenever a picker value is set programmatically
SelectionHook = Callable[[Color, str], None]


class WidgetMutator:
    """Applies show/hide, text, color, style and picker mutations."""

    def __init__(self, registry: WidgetRegistry) -> None:
        self._registry = registry
        self._selection_hook: SelectionHook | None = None

    def set_selection_hook(self, hook: SelectionHook | None) -> None:
        """Install the observer chain fired after a picker value changes."""
        self._selection_hook = hook

    def _require(self, widget_id: str, capability: Capability) -> WidgetHandle:
        handle = self._registry.lookup(widget_id)
        if not handle.supports(capability):
            raise CapabilityError(widget_id, CAPABILITY_LABELS[capability])
        return handle

    def show(self, widget_id: str) -> str:
        handle = self._require(widget_id, Capability.VISIBILITY)
        handle.surface.set_visible(True)
        return f"✅ shown: {widget_id}"

    def hide(self, widget_id: str) -> str:
        handle = self._require(widget_id, Capability.VISIBILITY)
        handle.surface.set_visible(False)
        return f"✅ hidden: {widget_id}"

    def set_text(self, widget_id: str, text: str) -> str:
        handle = self._require(widget_id, Capability.TEXT)
        handle.surface.set_text(text)
        return f"✅ text changed: {widget_id} → {text}"

    def set_background(self, widget_id: str, color: Color, source: str | None = None) -> str:
        """Replace the background color, keeping non-color declarations.

        Text-bearing widgets also get a contrasting text fill.

        Args:
            widget_id: Target widget
            color: New background
            source: Where the color came from (e.g. "history color 1"),
                used in the notice
        """
        handle = self._require(widget_id, Capability.BACKGROUND)
        surface = handle.surface
        text_fill = color.contrasting_text() if handle.supports(Capability.TEXT) else None
        surface.set_style(merge_background(surface.get_style(), color.css, text_fill))
        if source:
            return (
                f"✅ applied {source} to {handle.display_label} "
                f"({display_name(color)})"
            )
        return f"✅ color changed: {widget_id} → {color.hex}"

    def set_foreground(self, widget_id: str, color: Color) -> str:
        handle = self._require(widget_id, Capability.FOREGROUND)
        surface = handle.surface
        surface.set_style(merge_foreground(surface.get_style(), color.css))
        return f"✅ text color changed: {widget_id} → {color.hex}"

    def set_style(self, widget_id: str, style: str) -> str:
        handle = self._require(widget_id, Capability.STYLE)
        handle.surface.set_style(style)
        return f"✅ style set: {widget_id}"

    def set_picker_value(self, widget_id: str, color: Color, source: str) -> None:
        """Set a color picker and fire the same chain as a manual pick."""
        handle = self._require(widget_id, Capability.COLOR_PICKER)
        handle.surface.set_picker_value(color)
        if self._selection_hook is not None:
            self._selection_hook(color, source)
