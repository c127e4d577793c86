"""Request/response bridge between the session and the model.

Hides the prompt construction, the handshake, timeouts and the mapping of
transport failures onto replies. The client is connectionless (one HTTP
request per call) but keeps a logical ``connected`` flag: true after a
successful handshake, false after close.
"""

from collections.abc import Callable, Iterable

import openai

from ..prompts import get_command_prompt, get_handshake_prompt
from .base import LLMProvider
from .models import ChatMessage, ErrorReply, ParsedReply
from .parsing import parse_ai_response, parse_content

DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_HANDSHAKE_TIMEOUT = 10.0
HANDSHAKE_MESSAGE = "测试连接"

DebugCallback = Callable[[str, str, str], None]


def _status_body(error: openai.APIStatusError) -> str:
    response = getattr(error, "response", None)
    text = getattr(response, "text", None) if response is not None else None
    return text or error.message


class CommandClient:
    """Sends natural-language instructions and returns parsed replies."""

    def __init__(
        self,
        provider: LLMProvider,
        identifiers: Iterable[str],
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        handshake_timeout: float = DEFAULT_HANDSHAKE_TIMEOUT,
        model: str | None = None,
    ) -> None:
        self._provider = provider
        self._identifiers = list(identifiers)
        self._request_timeout = request_timeout
        self._handshake_timeout = handshake_timeout
        self._model = model
        self._connected = False
        self._system_prompt: str | None = None
        self._debug_callback: DebugCallback | None = None

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def system_prompt(self) -> str:
        """The command prompt with the registered identifiers filled in."""
        if self._system_prompt is None:
            self._system_prompt = get_command_prompt(self._identifiers)
        return self._system_prompt

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback: Callable(level, component, message)."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "LLM", message)

    def build_messages(self, instruction: str) -> list[ChatMessage]:
        return [
            ChatMessage(role="system", content=self.system_prompt),
            ChatMessage(role="user", content=instruction),
        ]

    async def connect(self) -> bool:
        """Verify the endpoint answers and mark the client connected.

        Returns:
            True on success, False if the handshake request failed
        """
        messages = [
            ChatMessage(role="system", content=get_handshake_prompt()),
            ChatMessage(role="user", content=HANDSHAKE_MESSAGE),
        ]
        try:
            await self._provider.chat_completion(
                messages, model=self._model, timeout=self._handshake_timeout
            )
        except openai.OpenAIError as e:
            self._debug("error", f"Handshake failed: {e}")
            self._connected = False
            return False

        self._debug("info", "Handshake succeeded")
        self._connected = True
        return True

    async def send_instruction(self, instruction: str) -> ParsedReply:
        """Send one instruction and parse the model's reply.

        Transport, HTTP and SDK failures are returned as ErrorReply, never raised.
        """
        if not self._connected:
            return ErrorReply(error="AI service not connected", source="transport")

        self._debug("info", f"Sending instruction: {instruction[:80]}")
        try:
            response = await self._provider.chat_completion(
                self.build_messages(instruction),
                model=self._model,
                timeout=self._request_timeout,
            )
        except openai.APIStatusError as e:
            self._debug("error", f"HTTP {e.status_code}")
            return ErrorReply(error=f"HTTP {e.status_code}", message=_status_body(e), source="http")
        except openai.APIConnectionError as e:
            self._debug("error", f"Transport failure: {e}")
            return ErrorReply(error="connection error", message=str(e), source="transport")
        except openai.OpenAIError as e:
            self._debug("error", f"Request failed: {e}")
            return ErrorReply(error="request error", message=str(e), source="transport")
        except Exception as e:
            self._debug("error", f"Request raised {type(e).__name__}: {e}")
            return ErrorReply(error=type(e).__name__, message=str(e), source="transport")

        self._debug("debug", f"Reply content: {response.content[:300]}")
        if response.raw is not None:
            return parse_ai_response(response.raw)
        return parse_content(response.content)

    async def close(self) -> None:
        """Mark the client disconnected and release the provider."""
        self._connected = False
        await self._provider.close()
        self._debug("info", "Client closed")
