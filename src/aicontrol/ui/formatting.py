"""Transcript formatting for the TUI.

Hides how transcript entries are rendered: prefixes per sender, timestamps
and text styling. User-supplied text is never interpreted as markup.
"""

from rich.text import Text

from ..conversation import ChatMessage, Sender
from .config import CHAT_TIMESTAMP_FORMAT

SENDER_PREFIXES = {
    Sender.SYSTEM: ("[System] ", "dim"),
    Sender.AI: ("🤖 AI: ", "bold magenta"),
    Sender.USER: ("👤 You: ", "bold cyan"),
}


def format_message(message: ChatMessage, show_timestamp: bool = False) -> Text:
    """Render one transcript entry as a single rich Text line."""
    prefix, style = SENDER_PREFIXES[message.sender]
    text = Text()
    if show_timestamp:
        text.append(message.timestamp.strftime(CHAT_TIMESTAMP_FORMAT) + " ", style="dim")
    text.append(prefix, style=style)
    if message.text.startswith("❌"):
        text.append(message.text, style="red")
    elif message.text.startswith("✅"):
        text.append(message.text, style="green")
    else:
        text.append(message.text)
    return text

