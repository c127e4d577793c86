"""Extraction of command envelopes from chat-completions responses.

The command travels as a JSON document inside the assistant message content,
itself inside the chat-completions JSON body. Anything that is not a command
is turned into a reply the session can still show to the user.
"""

import json
import re
from typing import Any

from pydantic import ValidationError

from ..commands.models import CommandEnvelope
from .models import CommandReply, ErrorReply, ParsedReply, RawReply, TextReply

# Longest raw body echoed back when a response cannot be decoded
MAX_RAW_RESPONSE = 500

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(content: str) -> str:
    """Remove Markdown code fences the model may wrap around its JSON."""
    return _FENCE_RE.sub("", content).strip()


def _message_content(root: dict[str, Any]) -> str | None:
    choices = root.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict) or "content" not in message:
        return None
    content = message["content"]
    return "" if content is None else str(content)


def parse_content(content: str) -> ParsedReply:
    """Interpret the assistant message content.

    Returns a CommandReply when the content is a JSON object carrying both
    ``command`` and ``description``; otherwise a TextReply with the content.
    """
    text = content.strip()
    cleaned = strip_code_fences(text)
    if not cleaned.startswith("{"):
        return TextReply(text=text)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        return TextReply(text=text, parse_error=str(e))

    if isinstance(data, dict) and "command" in data and "description" in data:
        try:
            return CommandReply(envelope=CommandEnvelope.model_validate(data))
        except ValidationError as e:
            return TextReply(text=text, parse_error=str(e))

    return TextReply(text=text)


def parse_ai_response(body: str | dict[str, Any]) -> ParsedReply:
    """Parse a chat-completions response body.

    Args:
        body: Raw JSON text or an already decoded JSON object

    Returns:
        CommandReply, TextReply, RawReply or ErrorReply
    """
    if isinstance(body, str):
        raw_text = body
        try:
            root: Any = json.loads(body)
        except json.JSONDecodeError as e:
            return ErrorReply(
                error="parse failure",
                message=str(e),
                raw_response=body[:MAX_RAW_RESPONSE],
                source="parse",
            )
    else:
        root = body
        raw_text = json.dumps(body, ensure_ascii=False)

    if not isinstance(root, dict):
        return RawReply(raw_response=raw_text)

    content = _message_content(root)
    if content is not None:
        return parse_content(content)

    error = root.get("error")
    if error is not None:
        message = error.get("message", "") if isinstance(error, dict) else str(error)
        return ErrorReply(error="API Error", message=str(message), source="api")

    return RawReply(raw_response=raw_text)
