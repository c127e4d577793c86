"""Widget Surface: the toolkit-facing side of the widget registry.

This module hides which GUI toolkit renders the widgets. A toolkit plugs in
by subclassing WidgetSurface for each kind of widget it exposes and declaring
the capabilities that kind supports. The mutator only ever calls operations
listed in a surface's capability set.

Inline styles use a small toolkit-neutral dialect of ``property: value;``
declarations. The color-related properties are ``background-color``,
``text-fill`` and ``border-color``; surfaces translate the dialect into
whatever their toolkit understands.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..colors import Color
from ..errors import CapabilityError


class Capability(str, Enum):
    """Mutation operations a widget can support."""

    VISIBILITY = "visibility"
    TEXT = "text"
    BACKGROUND = "background-color"
    FOREGROUND = "foreground-color"
    STYLE = "style"
    COLOR_PICKER = "color-picker-value"


# Human-readable names used in capability error messages
CAPABILITY_LABELS = {
    Capability.VISIBILITY: "visibility changes",
    Capability.TEXT: "text changes",
    Capability.BACKGROUND: "background colors",
    Capability.FOREGROUND: "foreground colors",
    Capability.STYLE: "inline styles",
    Capability.COLOR_PICKER: "color picker values",
}


class WidgetSurface(ABC):
    """A live widget as seen by the command engine.

    Subclasses override the operations backing their declared capabilities.
    The default implementations refuse with CapabilityError.
    """

    @property
    @abstractmethod
    def capabilities(self) -> frozenset[Capability]:
        """Operations this widget supports."""

    @property
    def label(self) -> str | None:
        """Short human-readable label (e.g. a button caption), if any."""
        return None

    def _refuse(self, capability: Capability) -> CapabilityError:
        return CapabilityError(type(self).__name__, CAPABILITY_LABELS[capability])

    def is_visible(self) -> bool:
        raise self._refuse(Capability.VISIBILITY)

    def set_visible(self, visible: bool) -> None:
        """Set visibility and layout inclusion together."""
        raise self._refuse(Capability.VISIBILITY)

    def get_text(self) -> str:
        raise self._refuse(Capability.TEXT)

    def set_text(self, text: str) -> None:
        raise self._refuse(Capability.TEXT)

    def get_style(self) -> str:
        raise self._refuse(Capability.STYLE)

    def set_style(self, style: str) -> None:
        """Replace the whole inline style string."""
        raise self._refuse(Capability.STYLE)

    def get_picker_value(self) -> Color:
        raise self._refuse(Capability.COLOR_PICKER)

    def set_picker_value(self, color: Color) -> None:
        """Set the picker value without firing the manual-pick event."""
        raise self._refuse(Capability.COLOR_PICKER)
