"""Color-selection pipeline.

Every surface that picks a color (the picker itself, preset buttons, history
swatches and setColorPicker commands) goes through ColorSelectionPipeline so
they all produce the same side effects.
"""

from typing import Final

from ..colors import Color, ColorHistory, display_name
from ..conversation import ConversationView
from ..widgets import Capability, WidgetMutator, WidgetRegistry

SOURCE_MANUAL: Final = "manual pick"
SOURCE_PRESET: Final = "preset button"
SOURCE_HISTORY: Final = "history swatch"
SOURCE_COMMAND: Final = "AI command"

# Widgets a selected color propagates to
AUTO_APPLY_BACKGROUND: Final[tuple[str, ...]] = ("btn1",)
AUTO_APPLY_FOREGROUND: Final[tuple[str, ...]] = ("titleLabel",)


class ColorSelectionPipeline:
    """Records a selected color and applies it to the auto-apply set."""

    def __init__(
        self,
        registry: WidgetRegistry,
        mutator: WidgetMutator,
        history: ColorHistory,
        view: ConversationView,
    ) -> None:
        self._registry = registry
        self._mutator = mutator
        self._history = history
        self._view = view

    def select(self, color: Color, source: str) -> None:
        """Run the selection side effects for a color.

        1. add the color to history
        2. append "<source> selected color: <name> (<hex>)" to the transcript
        3. apply it to the auto-apply set
        """
        self._history.add(color)
        self._view.system(f"{source} selected color: {display_name(color)} ({color.hex})")
        self._auto_apply(color)

    def _auto_apply(self, color: Color) -> None:
        for widget_id in AUTO_APPLY_BACKGROUND:
            if self._registry.can_set_background(widget_id):
                self._mutator.set_background(widget_id, color)
        for widget_id in AUTO_APPLY_FOREGROUND:
            handle = self._registry.get(widget_id)
            if handle is not None and handle.supports(Capability.FOREGROUND):
                self._mutator.set_foreground(widget_id, color)
