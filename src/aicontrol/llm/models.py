from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..commands.models import CommandEnvelope


class ChatMessage(BaseModel):
    """Represents a chat message sent to the model."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
    raw: dict[str, Any] | str | None = Field(
        default=None,
        description="Decoded JSON response body, or the body text if it was not JSON"
    )


class CommandReply(BaseModel):
    """The model answered with a command envelope."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["command"] = "command"
    envelope: CommandEnvelope


class TextReply(BaseModel):
    """The model answered with prose instead of a command."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str
    parse_error: str | None = None


class RawReply(BaseModel):
    """The response body did not follow the chat-completions shape."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    raw_response: str


class ErrorReply(BaseModel):
    """The request failed or the response could not be used.

    Attributes:
        error: Short error label ("HTTP 401", "connection error", ...)
        message: Details for the transcript
        raw_response: Truncated raw body, when one was received
        source: Where the failure happened
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    error: str
    message: str = ""
    raw_response: str | None = None
    source: Literal["transport", "http", "api", "parse"] = "transport"


ParsedReply = CommandReply | TextReply | RawReply | ErrorReply
