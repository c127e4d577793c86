"""UI-thread marshaling and background work.

Hides how work crosses between the UI thread and network I/O. Widget reads
and mutations run through ``run_on_ui``; network requests run through
``spawn``. Toolkits provide their own Scheduler (see ui.app); AsyncioScheduler
serves headless sessions and tests.
"""

import asyncio
import threading
from collections.abc import Callable, Coroutine
from typing import Any, Protocol


class Scheduler(Protocol):
    """The two primitives the session needs from its runtime."""

    def run_on_ui(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run a callback on the UI thread."""
        ...

    def spawn(self, work: Coroutine[Any, Any, Any]) -> None:
        """Start background work without waiting for it."""
        ...


class AsyncioScheduler:
    """Scheduler whose UI thread is the thread running the event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._thread_id: int | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
            self._thread_id = threading.get_ident()
        return self._loop

    def run_on_ui(self, callback: Callable[..., Any], *args: Any) -> None:
        loop = self._ensure_loop()
        if self._thread_id in (None, threading.get_ident()):
            callback(*args)
        else:
            loop.call_soon_threadsafe(callback, *args)

    def spawn(self, work: Coroutine[Any, Any, Any]) -> None:
        loop = self._ensure_loop()
        task = loop.create_task(work)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait until all spawned work, including work it spawns, is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
