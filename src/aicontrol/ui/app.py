"""Main Textual TUI application.

Composes the controllable widgets, wires them into the registry and the
session controller, and forwards user events (instructions, picks, presets,
swatch clicks) to the session.
"""

import asyncio
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Label, Static

from ..colors import ColorHistory
from ..commands import SOURCE_HISTORY, SOURCE_MANUAL, SOURCE_PRESET
from ..config import Settings, load_settings
from ..conversation import ConversationView
from ..session import ClientFactory, SessionController, SessionState, default_client_factory
from ..widgets import WidgetRegistry
from .callbacks import TUIScheduler, make_debug_callback
from .config import (
    BUTTON1_TEXT,
    BUTTON2_TEXT,
    COMMAND_PLACEHOLDER,
    EXECUTE_TEXT,
    SAMPLE_TEXT,
    TITLE_TEXT,
)
from .styles import APP_CSS
from .surfaces import register_widgets
from .themes import CONTROL_LIGHT, THEMES
from .widgets import (
    ChatArea,
    ColorPickerField,
    DebugPanel,
    HistoryStrip,
    PresetBar,
    PresetButton,
    StatusLabel,
    Swatch,
)


class AIControlApp(App):
    """Textual TUI for natural-language interface control."""

    CSS = APP_CSS
    TITLE = "AI Control"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
    ]

    def __init__(
        self,
        settings_loader: Callable[[], Settings] = load_settings,
        client_factory: ClientFactory = default_client_factory,
    ) -> None:
        super().__init__()
        self.registry = WidgetRegistry()
        self.view = ConversationView()
        self.history = ColorHistory()
        self.controller = SessionController(
            self.registry,
            self.view,
            TUIScheduler(self),
            history=self.history,
            settings_loader=settings_loader,
            client_factory=client_factory,
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="main"):
            with Vertical(id="controlPanel"):
                yield Label(TITLE_TEXT, id="titleLabel", markup=False)
                with Horizontal(id="button-row"):
                    yield Button(BUTTON1_TEXT, id="btn1")
                    yield Button(BUTTON2_TEXT, id="btn2")
                yield Input(value=SAMPLE_TEXT, id="sampleText")
                yield Static("Color", classes="section-title")
                yield ColorPickerField(history=self.history, id="colorPicker")
                yield Static("Presets", classes="section-title")
                yield PresetBar()
                yield Static("Recent colors", classes="section-title")
                yield HistoryStrip(id="color-history")

            with Vertical(id="conversation"):
                yield ChatArea(id="chatArea")
                yield StatusLabel("", id="statusLabel")
                with Horizontal(id="command-bar"):
                    yield Input(placeholder=COMMAND_PLACEHOLDER, id="commandInput")
                    yield Button(EXECUTE_TEXT, id="executeButton", variant="primary")

        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Register the widgets and start the session."""
        for theme in THEMES:
            self.register_theme(theme)
        self.theme = CONTROL_LIGHT.name

        self.query_one("#controlPanel").border_title = "Controls"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        chat = self.query_one("#chatArea", ChatArea)
        status = self.query_one("#statusLabel", StatusLabel)
        strip = self.query_one("#color-history", HistoryStrip)

        self.view.subscribe(on_message=chat.add_message, on_status=status.show_status)
        self.history.subscribe(strip.show_colors)

        count = register_widgets(
            self, self.registry, on_rejected=lambda message: log_panel.warning("TUI", message)
        )
        log_panel.info("TUI", f"Registered {count} widgets")

        self.controller.set_debug_callback(make_debug_callback(log_panel, app=self))
        self.controller.start()
        self.query_one("#commandInput", Input).focus()

    def _submit_command(self) -> None:
        command_input = self.query_one("#commandInput", Input)
        text = command_input.value
        if not text.strip():
            return
        command_input.value = ""
        self.controller.submit(text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "commandInput":
            self._submit_command()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "executeButton":
            self._submit_command()

    def on_color_picker_field_picked(self, event: ColorPickerField.Picked) -> None:
        self.controller.select_color(event.color, SOURCE_MANUAL)

    def on_preset_button_chosen(self, event: PresetButton.Chosen) -> None:
        self.controller.pick_color(event.color, SOURCE_PRESET)

    def on_swatch_selected(self, event: Swatch.Selected) -> None:
        self.controller.pick_color(event.color, SOURCE_HISTORY)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_toggle_theme(self) -> None:
        names = [theme.name for theme in THEMES]
        current = names.index(self.theme) if self.theme in names else -1
        self.theme = names[(current + 1) % len(names)]

    async def action_quit(self) -> None:
        """Close the AI connection, then exit."""
        await self.controller.shutdown()
        self.exit()


async def run_textual_tui(
    settings_loader: Callable[[], Settings] = load_settings,
    client_factory: ClientFactory = default_client_factory,
) -> None:
    """Run the Textual TUI until the user quits."""
    app = AIControlApp(settings_loader=settings_loader, client_factory=client_factory)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        # Exits that bypass action_quit still release the HTTP client
        client = app.controller.client
        if app.controller.state != SessionState.DISCONNECTED and client is not None:
            await client.close()
