"""
aicontrol: natural-language control of a live terminal interface.

A user instruction goes to an LLM, the reply comes back as a structured
command, and the command is applied to a registry of on-screen widgets.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .colors import Color, ColorHistory, parse_color
from .commands import CommandDispatcher, CommandEnvelope, CommandKind, DispatchStatus
from .config import Settings, load_settings
from .conversation import ConversationView
from .errors import AIControlError
from .session import SessionController, SessionState
from .widgets import WidgetMutator, WidgetRegistry, WidgetSurface

__all__ = [
    "AIControlError",
    "Color",
    "ColorHistory",
    "CommandDispatcher",
    "CommandEnvelope",
    "CommandKind",
    "ConversationView",
    "DispatchStatus",
    "SessionController",
    "SessionState",
    "Settings",
    "WidgetMutator",
    "WidgetRegistry",
    "WidgetSurface",
    "load_settings",
    "parse_color",
]
