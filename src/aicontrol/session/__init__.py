"""Session orchestration for aicontrol."""

from .controller import (
    PICKER_ID,
    ClientFactory,
    SessionController,
    SessionState,
    default_client_factory,
)
from .scheduling import AsyncioScheduler, Scheduler

__all__ = [
    "AsyncioScheduler",
    "ClientFactory",
    "PICKER_ID",
    "Scheduler",
    "SessionController",
    "SessionState",
    "default_client_factory",
]
