"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Transcript rendering and scrolling
- Status indicator coloring
- The color picker (Textual has none) and its manual-pick event
- Preset buttons and the history swatch strip
- Log rendering with level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..colors import PRESET_COLORS, Color, ColorHistory, display_name, try_parse_color
from ..conversation import ChatMessage, Status, StatusLevel
from .config import LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import format_message


class ChatArea(RichLog):
    """Read-only transcript of the conversation."""

    BORDER_TITLE = "Conversation"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(
            *args,
            markup=False,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )

    def add_message(self, message: ChatMessage) -> None:
        self.write(format_message(message))


class StatusLabel(Static):
    """One-line status indicator colored by level."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, markup=False, **kwargs)

    def show_status(self, status: Status) -> None:
        for level in StatusLevel:
            self.remove_class(f"-{level.value}")
        self.add_class(f"-{status.level.value}")
        self.update(status.text)


class ColorPickerField(Horizontal):
    """A color swatch plus a text field accepting any color literal.

    Submitting the field is a manual pick and posts Picked. Setting the value
    programmatically with set_value does not.
    """

    class Picked(Message):
        """Posted when the user picks a color by hand."""

        def __init__(self, picker: "ColorPickerField", color: Color) -> None:
            super().__init__()
            self.picker = picker
            self.color = color

    def __init__(
        self, value: Color | None = None, history: ColorHistory | None = None, **kwargs
    ) -> None:
        super().__init__(**kwargs)
        self._value = value if value is not None else Color.from_rgb255(255, 255, 255)
        self._history = history

    def compose(self) -> ComposeResult:
        yield Static(id="picker-swatch")
        yield Input(
            value=self._value.hex,
            placeholder="#RRGGBB, rgb(...), red, 红色",
            id="picker-input",
        )

    def on_mount(self) -> None:
        self._paint()

    @property
    def value(self) -> Color:
        return self._value

    def set_value(self, color: Color) -> None:
        self._value = color
        if self.is_mounted:
            self.query_one("#picker-input", Input).value = color.hex
            self._paint()

    def _paint(self) -> None:
        swatch = self.query_one("#picker-swatch", Static)
        swatch.styles.background = self._value.css
        swatch.tooltip = f"{display_name(self._value)} ({self._value.hex})"

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        color = try_parse_color(event.value, self._history)
        if color is None:
            self.app.notify(f"Cannot recognize color: {event.value}", severity="warning", timeout=3)
            return
        self.set_value(color)
        self.post_message(self.Picked(self, color))


class PresetButton(Button):
    """A button filled with one preset color."""

    class Chosen(Message):
        def __init__(self, color: Color) -> None:
            super().__init__()
            self.color = color

    def __init__(self, name: str, color: Color, **kwargs) -> None:
        super().__init__(" ", **kwargs)
        self.color = color
        self.tooltip = f"{name} ({color.hex})"

    def on_mount(self) -> None:
        self.styles.background = self.color.css

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.Chosen(self.color))


class PresetBar(Horizontal):
    """Row of the ten preset colors."""

    def compose(self) -> ComposeResult:
        for color in PRESET_COLORS.values():
            yield PresetButton(display_name(color), color)


class Swatch(Static):
    """One history entry. Clicking re-selects its color."""

    class Selected(Message):
        def __init__(self, color: Color, index: int) -> None:
            super().__init__()
            self.color = color
            self.index = index

    def __init__(self, color: Color, index: int, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.color = color
        self.index = index
        self.tooltip = f"{index}. {display_name(color)} ({color.hex})"

    def on_mount(self) -> None:
        self.styles.background = self.color.css

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Selected(self.color, self.index))


class HistoryStrip(Horizontal):
    """Swatches for the recently used colors, most recent first."""

    def on_mount(self) -> None:
        self.show_colors(())

    def show_colors(self, colors: tuple[Color, ...]) -> None:
        """Replace the swatches with a new history snapshot."""
        self.remove_children()
        if not colors:
            self.mount(Static("no colors yet", classes="history-empty"))
            return
        self.mount(*(Swatch(color, index) for index, color in enumerate(colors, 1)))


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def record(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, Dispatcher, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "Session": "green",
            "Dispatch": "bright_blue",
            "LLM": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")
        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.record(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.record(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.record(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.record(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
