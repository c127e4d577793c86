"""Conversation transcript for aicontrol."""

from .models import ChatMessage, Sender, Status, StatusLevel
from .view import ConversationView

__all__ = ["ChatMessage", "ConversationView", "Sender", "Status", "StatusLevel"]
