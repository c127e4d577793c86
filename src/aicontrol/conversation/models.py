"""Data models for the conversation transcript.

Hides the representation of transcript entries and the status indicator.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Sender(str, Enum):
    """Who a transcript entry comes from."""

    USER = "user"
    AI = "ai"
    SYSTEM = "system"


class StatusLevel(str, Enum):
    """Color of the status indicator."""

    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ChatMessage:
    """A transcript entry. Appended once, never mutated."""

    sender: Sender
    text: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class Status:
    """Current value of the status indicator."""

    text: str
    level: StatusLevel = StatusLevel.NEUTRAL
