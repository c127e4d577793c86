from typing import Any

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DASHSCOPE_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
DEFAULT_MODEL = "qwen-max"


class OpenAICompatibleProvider(LLMProvider):
    """Chat-completions provider for any OpenAI-compatible endpoint.

    Defaults to Qwen through DashScope's compatible mode.

    Hidden design decisions:
    - OpenAI SDK client initialization and bearer authentication
    - Message format conversion
    - Per-request timeout handling
    - Retry policy (none by default: a failed request is surfaced, not retried)
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = DASHSCOPE_BASE_URL,
        max_retries: int = 0,
        **client_kwargs: Any
    ):
        """Initialize the provider.

        Args:
            api_key: Bearer token for the endpoint
            model: Default model to use
            base_url: Endpoint base URL (chat/completions is appended)
            max_retries: Retries performed by the SDK on transient errors
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=max_retries,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        timeout: float | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion with ``stream`` disabled.

        Args:
            messages: System and user messages
            model: Model to use (overrides default)
            timeout: Per-request timeout in seconds
            **kwargs: Additional request parameters

        Returns:
            LLMResponse with generated content and the decoded body, or the
            body text when the endpoint did not answer with JSON
        """
        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": [{"role": msg.role, "content": msg.content} for msg in messages],
            "stream": False,
            **kwargs
        }
        if timeout is not None:
            request_params["timeout"] = timeout

        completion = await self._client.chat.completions.create(**request_params)

        if not isinstance(completion, ChatCompletion):
            # The SDK hands back the body as text when it is not JSON
            text = completion if isinstance(completion, str) else str(completion)
            return LLMResponse(content=text, model=request_params["model"], raw=text)

        usage = None
        if completion.usage:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        content = ""
        if completion.choices:
            content = completion.choices[0].message.content or ""

        return LLMResponse(
            content=content,
            model=completion.model or request_params["model"],
            usage=usage,
            raw=completion.model_dump(mode="json")
        )

    async def close(self) -> None:
        """Close the underlying HTTP client.

        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
