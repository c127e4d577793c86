"""Command dispatcher.

Validates command envelopes and routes them to the widget mutator, the color
history or the color-selection pipeline. Every dispatch prints the envelope's
description first and ends with exactly one terminal status.
"""

from collections.abc import Callable
from typing import Any

from ..colors import ColorHistory, display_name, parse_color, parse_history_index
from ..conversation import ConversationView
from ..errors import AIControlError, MissingParameterError
from ..widgets import WidgetMutator
from .models import CommandEnvelope, CommandKind, DispatchStatus
from .selection import SOURCE_COMMAND, ColorSelectionPipeline

DebugCallback = Callable[[str, str, str], None]


class CommandDispatcher:
    """Routes command envelopes to their handlers."""

    def __init__(
        self,
        mutator: WidgetMutator,
        history: ColorHistory,
        view: ConversationView,
        pipeline: ColorSelectionPipeline,
    ) -> None:
        self._mutator = mutator
        self._history = history
        self._view = view
        self._pipeline = pipeline
        self._debug_callback: DebugCallback | None = None
        self._handlers: dict[CommandKind, Callable[[CommandEnvelope], None]] = {
            CommandKind.SHOW_COMPONENT: self._show_component,
            CommandKind.HIDE_COMPONENT: self._hide_component,
            CommandKind.CHANGE_TEXT: self._change_text,
            CommandKind.CHANGE_COLOR: self._change_color,
            CommandKind.SET_COLOR_PICKER: self._set_color_picker,
            CommandKind.SET_STYLE: self._set_style,
            CommandKind.SHOW_COLOR_HISTORY: self._show_color_history,
            CommandKind.CLEAR_COLOR_HISTORY: self._clear_color_history,
            CommandKind.APPLY_HISTORY_COLOR: self._apply_history_color,
        }

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback: Callable(level, component, message)."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Dispatch", message)

    def dispatch(self, envelope: CommandEnvelope) -> DispatchStatus:
        """Execute one command envelope.

        Returns:
            The terminal status, which is also shown on the status indicator
        """
        if envelope.description:
            self._view.ai(envelope.description)
        self._debug("info", f"{envelope.command} -> {envelope.target or '-'} {envelope.params}")

        try:
            kind = CommandKind.from_name(envelope.command)
            self._handlers[kind](envelope)
            status = DispatchStatus.SUCCESS
        except AIControlError as e:
            self._debug("warning", str(e))
            self._view.system(f"❌ {e}")
            status = DispatchStatus.FAILED
        except Exception as e:
            self._debug("error", f"{type(e).__name__}: {e}")
            self._view.system(f"❌ execution error: {e}")
            status = DispatchStatus.ERROR

        self._view.set_status(status.label, status.level)
        return status

    @staticmethod
    def _param(envelope: CommandEnvelope, name: str) -> Any:
        value = envelope.params.get(name)
        if value is None:
            raise MissingParameterError(envelope.command, name)
        return value

    def _show_component(self, envelope: CommandEnvelope) -> None:
        self._view.system(self._mutator.show(envelope.target))

    def _hide_component(self, envelope: CommandEnvelope) -> None:
        self._view.system(self._mutator.hide(envelope.target))

    def _change_text(self, envelope: CommandEnvelope) -> None:
        text = str(self._param(envelope, "text"))
        self._view.system(self._mutator.set_text(envelope.target, text))

    def _change_color(self, envelope: CommandEnvelope) -> None:
        color = parse_color(str(self._param(envelope, "color")), self._history)
        self._view.system(self._mutator.set_background(envelope.target, color))
        self._history.add(color)

    def _set_color_picker(self, envelope: CommandEnvelope) -> None:
        color = parse_color(str(self._param(envelope, "color")), self._history)
        self._mutator.set_picker_value(envelope.target, color, SOURCE_COMMAND)

    def _set_style(self, envelope: CommandEnvelope) -> None:
        style = str(self._param(envelope, "style"))
        self._view.system(self._mutator.set_style(envelope.target, style))

    def _show_color_history(self, envelope: CommandEnvelope) -> None:
        colors = self._history.snapshot()
        if not colors:
            self._view.system("📭 color history is empty")
            return
        self._view.system("🎨 recently used colors:")
        for position, color in enumerate(colors, start=1):
            self._view.system(f"  {position}. {display_name(color)} ({color.hex})")

    def _clear_color_history(self, envelope: CommandEnvelope) -> None:
        self._history.clear()
        self._view.system("✅ color history cleared")

    def _apply_history_color(self, envelope: CommandEnvelope) -> None:
        raw_index = self._param(envelope, "index")
        target = envelope.params.get("target") or envelope.target
        if not target:
            raise MissingParameterError(envelope.command, "target")

        if isinstance(raw_index, bool):
            raise MissingParameterError(envelope.command, "index")
        if isinstance(raw_index, float) and raw_index.is_integer():
            raw_index = int(raw_index)
        try:
            index = raw_index if isinstance(raw_index, int) else parse_history_index(str(raw_index))
        except ValueError:
            raise MissingParameterError(envelope.command, "index") from None

        color = self._history.get(index)
        notice = self._mutator.set_background(str(target), color, source=f"history color {index}")
        self._view.system(notice)
