"""Command taxonomy, dispatcher and color-selection pipeline."""

from .dispatcher import CommandDispatcher
from .models import CommandEnvelope, CommandKind, DispatchStatus
from .selection import (
    AUTO_APPLY_BACKGROUND,
    AUTO_APPLY_FOREGROUND,
    SOURCE_COMMAND,
    SOURCE_HISTORY,
    SOURCE_MANUAL,
    SOURCE_PRESET,
    ColorSelectionPipeline,
)

__all__ = [
    "AUTO_APPLY_BACKGROUND",
    "AUTO_APPLY_FOREGROUND",
    "ColorSelectionPipeline",
    "CommandDispatcher",
    "CommandEnvelope",
    "CommandKind",
    "DispatchStatus",
    "SOURCE_COMMAND",
    "SOURCE_HISTORY",
    "SOURCE_MANUAL",
    "SOURCE_PRESET",
]
