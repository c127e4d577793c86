"""Append-only conversation transcript and status indicator.

The view is toolkit-independent: widgets that render it subscribe as
observers and are called synchronously on every change.
"""

from collections.abc import Callable

from .models import ChatMessage, Sender, Status, StatusLevel

MessageObserver = Callable[[ChatMessage], None]
StatusObserver = Callable[[Status], None]


class ConversationView:
    """Transcript of user inputs, AI descriptions and system notices."""

    def __init__(self) -> None:
        self._messages: list[ChatMessage] = []
        self._status = Status("", StatusLevel.NEUTRAL)
        self._message_observers: list[MessageObserver] = []
        self._status_observers: list[StatusObserver] = []

    def append(self, sender: Sender, text: str) -> ChatMessage:
        """Append an entry and notify observers."""
        message = ChatMessage(sender=sender, text=text)
        self._messages.append(message)
        for observer in self._message_observers:
            observer(message)
        return message

    def user(self, text: str) -> ChatMessage:
        return self.append(Sender.USER, text)

    def ai(self, text: str) -> ChatMessage:
        return self.append(Sender.AI, text)

    def system(self, text: str) -> ChatMessage:
        return self.append(Sender.SYSTEM, text)

    def set_status(self, text: str, level: StatusLevel = StatusLevel.NEUTRAL) -> None:
        self._status = Status(text, level)
        for observer in self._status_observers:
            observer(self._status)

    @property
    def status(self) -> Status:
        return self._status

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def texts(self, sender: Sender | None = None) -> list[str]:
        """Entry texts, optionally filtered by sender."""
        return [m.text for m in self._messages if sender is None or m.sender == sender]

    def subscribe(
        self,
        on_message: MessageObserver | None = None,
        on_status: StatusObserver | None = None,
    ) -> None:
        """Register observers for new entries and status changes."""
        if on_message is not None:
            self._message_observers.append(on_message)
        if on_status is not None:
            self._status_observers.append(on_status)

    def __len__(self) -> int:
        return len(self._messages)
