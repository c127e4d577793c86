"""Widget registry: identifier to widget mapping.

Identifiers are case-sensitive. Entries are created once at session start and
never removed or reassigned. The registry holds non-owning references; the
toolkit owns the widgets.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from ..errors import WidgetNotFoundError
from .base import Capability, WidgetSurface

DEFAULT_WIDGET_IDS: Final[tuple[str, ...]] = (
    "btn1",
    "btn2",
    "sampleText",
    "colorPicker",
    "titleLabel",
    "chatArea",
    "controlPanel",
    "statusLabel",
    "commandInput",
    "executeButton",
)


@dataclass(frozen=True)
class WidgetHandle:
    """A registered widget and the capabilities discovered at registration."""

    widget_id: str
    surface: WidgetSurface
    capabilities: frozenset[Capability]

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    @property
    def display_label(self) -> str:
        """Label used in transcript notices: caption when present, else id."""
        label = self.surface.label
        return f"{self.widget_id} ({label})" if label else self.widget_id


class WidgetRegistry:
    """Name-to-widget mapping with capability queries."""

    def __init__(self) -> None:
        self._handles: dict[str, WidgetHandle] = {}

    def register(self, widget_id: str, surface: WidgetSurface) -> WidgetHandle:
        """Register a widget under an identifier.

        Raises:
            ValueError: If the identifier is empty or already registered
        """
        if not widget_id:
            raise ValueError("widget identifier must not be empty")
        if widget_id in self._handles:
            raise ValueError(f"widget already registered: {widget_id}")
        handle = WidgetHandle(
            widget_id=widget_id,
            surface=surface,
            capabilities=frozenset(surface.capabilities),
        )
        self._handles[widget_id] = handle
        return handle

    def lookup(self, widget_id: str) -> WidgetHandle:
        """Get a registered widget.

        Raises:
            WidgetNotFoundError: If nothing is registered under the identifier
        """
        handle = self._handles.get(widget_id)
        if handle is None:
            raise WidgetNotFoundError(widget_id)
        return handle

    def get(self, widget_id: str) -> WidgetHandle | None:
        return self._handles.get(widget_id)

    def can_set_text(self, widget_id: str) -> bool:
        handle = self.get(widget_id)
        return handle is not None and handle.supports(Capability.TEXT)

    def can_set_background(self, widget_id: str) -> bool:
        handle = self.get(widget_id)
        return handle is not None and handle.supports(Capability.BACKGROUND)

    def is_color_picker(self, widget_id: str) -> bool:
        handle = self.get(widget_id)
        return handle is not None and handle.supports(Capability.COLOR_PICKER)

    def identifiers(self) -> list[str]:
        """Registered identifiers in registration order."""
        return list(self._handles)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[WidgetHandle]:
        return iter(list(self._handles.values()))
