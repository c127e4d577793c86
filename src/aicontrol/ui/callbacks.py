"""Session integration for the TUI.

Hides how the session controller reaches the UI: model requests run as
Textual workers, UI work from any other thread goes through
call_from_thread, and debug messages land in the DebugPanel.
"""

import threading
from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any

from .config import LLM_WORKER_GROUP, LogLevel

if TYPE_CHECKING:
    from textual.app import App
    from textual.worker import Worker

    from .widgets import DebugPanel


class TUIScheduler:
    """Scheduler backed by a running Textual app.

    Workers are async tasks on the app's event loop, so network I/O never
    blocks the UI; run_on_ui only hops threads when called from outside it.
    """

    def __init__(self, app: "App") -> None:
        self.app = app

    def run_on_ui(self, callback: Callable[..., Any], *args: Any) -> None:
        """Call a function on the UI thread."""
        if self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(callback, *args)
        else:
            callback(*args)

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> "Worker":
        return self.app.run_worker(coro, group=LLM_WORKER_GROUP, exit_on_error=False)


def make_debug_callback(
    panel: "DebugPanel", app: "App | None" = None
) -> Callable[[str, str, str], None]:
    """Build a debug callback that routes messages to the log panel.

    Args:
        panel: Log panel receiving the messages
        app: App used to hop onto the UI thread when needed
    """

    def debug_callback(level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        numeric = LogLevel.from_string(level)
        if app is not None and app._thread_id != threading.get_ident():
            app.call_from_thread(panel.record, component, message, numeric)
        else:
            panel.record(component, message, numeric)

    return debug_callback
