from .base import LLMProvider
from .client import DEFAULT_HANDSHAKE_TIMEOUT, DEFAULT_REQUEST_TIMEOUT, CommandClient
from .factory import create_llm_provider
from .models import (
    ChatMessage,
    CommandReply,
    ErrorReply,
    LLMResponse,
    ParsedReply,
    RawReply,
    TextReply,
)
from .parsing import parse_ai_response, parse_content, strip_code_fences
from .providers import OpenAICompatibleProvider

__all__ = [
    "ChatMessage",
    "CommandClient",
    "CommandReply",
    "DEFAULT_HANDSHAKE_TIMEOUT",
    "DEFAULT_REQUEST_TIMEOUT",
    "ErrorReply",
    "LLMProvider",
    "LLMResponse",
    "OpenAICompatibleProvider",
    "ParsedReply",
    "RawReply",
    "TextReply",
    "create_llm_provider",
    "parse_ai_response",
    "parse_content",
    "strip_code_fences",
]
