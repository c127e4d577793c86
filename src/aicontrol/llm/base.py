from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which LLM vendor answers
    instructions. Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Timeouts

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(messages)
        # Automatically cleaned up
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        timeout: float | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a non-streamed chat completion.

        Args:
            messages: List of chat messages forming the request
            model: Model to use (None uses provider's default)
            timeout: Per-request timeout in seconds
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and the raw body

        Raises:
            openai.APIStatusError: Non-2xx response
            openai.APIConnectionError: Transport failure or timeout
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
