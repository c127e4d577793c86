"""Session controller.

Orchestrates startup (widget registration is done by the toolkit before
start), credential discovery, the LLM handshake, the
input -> model -> dispatcher -> mutator cycle, and teardown.

State machine:
    INITIALIZING -> NEEDS_CREDENTIALS            (no API key; terminal)
    INITIALIZING -> CONNECTING -> CONNECTED      (handshake succeeded)
                             \\-> DISCONNECTED   (handshake failed)
    any -> DISCONNECTED                          (teardown)
"""

import asyncio
from collections.abc import Callable
from enum import Enum

from ..colors import Color, ColorHistory
from ..commands import ColorSelectionPipeline, CommandDispatcher, DispatchStatus
from ..config import API_KEY_ENV, Settings, load_settings
from ..conversation import ConversationView, StatusLevel
from ..errors import MissingCredentialsError
from ..llm import (
    CommandClient,
    CommandReply,
    ErrorReply,
    ParsedReply,
    RawReply,
    TextReply,
    create_llm_provider,
)
from ..widgets import WidgetMutator, WidgetRegistry
from .scheduling import Scheduler

DebugCallback = Callable[[str, str, str], None]
ClientFactory = Callable[[Settings, list[str]], CommandClient]

WELCOME_LINES = (
    "🤖 AI assistant started",
    "Type natural-language instructions to control the interface, for example:",
    "  • 'hide button one'",
    "  • 'change the title to red'",
    "  • 'show all components'",
    "  • 'set the color picker to blue'",
)

PICKER_ID = "colorPicker"


class SessionState(str, Enum):
    INITIALIZING = "initializing"
    NEEDS_CREDENTIALS = "needs-credentials"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


def default_client_factory(settings: Settings, identifiers: list[str]) -> CommandClient:
    """Build a CommandClient for the Qwen compatible-mode endpoint."""
    provider = create_llm_provider(
        "qwen",
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
    )
    return CommandClient(
        provider,
        identifiers,
        request_timeout=settings.request_timeout,
        handshake_timeout=settings.handshake_timeout,
    )


class SessionController:
    """Owns the session state and drives one submission at a time.

    Submissions are serialized: a request is only sent once the previous
    reply has been fully dispatched, so transcript entries of different
    submissions never interleave.
    """

    def __init__(
        self,
        registry: WidgetRegistry,
        view: ConversationView,
        scheduler: Scheduler,
        history: ColorHistory | None = None,
        settings_loader: Callable[[], Settings] = load_settings,
        client_factory: ClientFactory = default_client_factory,
    ) -> None:
        self.registry = registry
        self.view = view
        self.history = history if history is not None else ColorHistory()
        self.mutator = WidgetMutator(registry)
        self.pipeline = ColorSelectionPipeline(registry, self.mutator, self.history, view)
        self.dispatcher = CommandDispatcher(self.mutator, self.history, view, self.pipeline)
        self.mutator.set_selection_hook(self.pipeline.select)

        self._scheduler = scheduler
        self._settings_loader = settings_loader
        self._client_factory = client_factory
        self._client: CommandClient | None = None
        self._state = SessionState.INITIALIZING
        self._lock = asyncio.Lock()
        self._debug_callback: DebugCallback | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def client(self) -> CommandClient | None:
        return self._client

    @property
    def is_connected(self) -> bool:
        return (
            self._state == SessionState.CONNECTED
            and self._client is not None
            and self._client.connected
        )

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback and propagate it to the dispatcher and client.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self.dispatcher.set_debug_callback(callback)
        if self._client is not None:
            self._client.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Session", message)

    def _set_state(self, state: SessionState) -> None:
        self._debug("debug", f"{self._state.value} -> {state.value}")
        self._state = state

    # Startup

    def start(self) -> None:
        """Greet, discover credentials and begin the handshake."""
        self._set_state(SessionState.INITIALIZING)
        self.view.set_status("initializing...", StatusLevel.ORANGE)
        for line in WELCOME_LINES:
            self.view.system(line)
        self.view.system(f"registered {len(self.registry)} controllable components")

        settings = self._settings_loader()
        if not settings.has_credentials:
            self._set_state(SessionState.NEEDS_CREDENTIALS)
            self.view.system(f"❌ {MissingCredentialsError()}")
            self.view.system(f"please set it: export {API_KEY_ENV}=your_key_here")
            self.view.set_status("API key required", StatusLevel.RED)
            return

        self._set_state(SessionState.CONNECTING)
        self.view.system("connecting to Qwen AI service...")
        self.view.set_status("connecting...", StatusLevel.ORANGE)
        client = self._client_factory(settings, self.registry.identifiers())
        client.set_debug_callback(self._debug_callback)
        self._client = client
        self._scheduler.spawn(self._handshake(client))

    async def _handshake(self, client: CommandClient) -> None:
        try:
            ok = await client.connect()
        except Exception as e:
            self._debug("error", f"Handshake raised {type(e).__name__}: {e}")
            self._scheduler.run_on_ui(self._on_handshake_error, e)
            return
        self._scheduler.run_on_ui(self._on_handshake_done, ok)

    def _on_handshake_done(self, ok: bool) -> None:
        if self._state != SessionState.CONNECTING:
            return
        if ok:
            self._set_state(SessionState.CONNECTED)
            self.view.system("✅ connected to Qwen AI assistant")
            self.view.set_status("connected", StatusLevel.GREEN)
        else:
            self._set_state(SessionState.DISCONNECTED)
            self.view.system("❌ failed to connect to Qwen service")
            self.view.set_status("connection failed", StatusLevel.RED)

    def _on_handshake_error(self, error: Exception) -> None:
        if self._state != SessionState.CONNECTING:
            return
        self._set_state(SessionState.DISCONNECTED)
        self.view.system(f"connection error: {error}")
        self.view.set_status("connection error", StatusLevel.RED)

    # Submissions

    def submit(self, text: str) -> bool:
        """Echo a user instruction and send it to the model.

        Returns:
            True if a request was started
        """
        instruction = text.strip()
        if not instruction:
            return False

        if not self.is_connected:
            self.view.system("❌ AI service not connected, please check the connection")
            self.view.set_status("not connected", StatusLevel.RED)
            return False

        self.view.user(instruction)
        self.view.set_status("AI thinking...", StatusLevel.ORANGE)
        self._scheduler.spawn(self._request(instruction))
        return True

    async def _request(self, instruction: str) -> None:
        async with self._lock:
            client = self._client
            if client is None or not client.connected:
                return
            try:
                reply = await client.send_instruction(instruction)
            except Exception as e:
                self._debug("error", f"Request raised {type(e).__name__}: {e}")
                reply = ErrorReply(error=type(e).__name__, message=str(e), source="transport")
            self._scheduler.run_on_ui(self.handle_reply, reply)

    def handle_reply(self, reply: ParsedReply) -> DispatchStatus | None:
        """Render or execute a reply. Dropped once the session is torn down."""
        if not self.is_connected:
            self._debug("debug", f"Dropping {reply.kind} reply after disconnect")
            return None

        if isinstance(reply, CommandReply):
            return self.dispatcher.dispatch(reply.envelope)

        if isinstance(reply, TextReply):
            self.view.ai(reply.text)
            self.view.set_status("ready", StatusLevel.GREEN)
        elif isinstance(reply, RawReply):
            self.view.ai(reply.raw_response)
            self.view.set_status("ready", StatusLevel.GREEN)
        elif isinstance(reply, ErrorReply):
            self._render_error(reply)
        return None

    def _render_error(self, reply: ErrorReply) -> None:
        if reply.source == "parse":
            self.view.ai(reply.raw_response or reply.message)
            self.view.set_status("ready", StatusLevel.GREEN)
        elif reply.source == "http":
            self.view.system(f"❌ {reply.error}: {reply.message}")
            self.view.set_status(reply.error, StatusLevel.RED)
        elif reply.source == "api":
            self.view.system(f"❌ {reply.error}: {reply.message}")
            self.view.set_status("processing error", StatusLevel.RED)
        else:
            self.view.system(f"❌ connection error: {reply.message or reply.error}")
            self.view.set_status("connection error", StatusLevel.RED)

    # Color selection entry points for toolkit events

    def select_color(self, color: Color, source: str) -> None:
        """A color was picked directly on the picker."""
        self.pipeline.select(color, source)

    def pick_color(self, color: Color, source: str) -> None:
        """A color was chosen elsewhere (preset, swatch): move the picker too."""
        if self.registry.is_color_picker(PICKER_ID):
            self.mutator.set_picker_value(PICKER_ID, color, source)
        else:
            self.pipeline.select(color, source)

    # Teardown

    async def shutdown(self) -> None:
        """Close the client. In-flight replies are dropped when they land."""
        client = self._client
        self._set_state(SessionState.DISCONNECTED)
        if client is not None:
            await client.close()
            self.view.system("AI connection closed")
