from typing import Any

from .base import LLMProvider
from .providers import DASHSCOPE_BASE_URL, OpenAICompatibleProvider


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('qwen', 'dashscope', 'openai')
        **config: Provider configuration
            - api_key: str (required)
            - model: str (default: 'qwen-max')
            - base_url: str (default: DashScope compatible mode for qwen,
              the OpenAI API for openai)

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider("qwen", api_key="sk-...")
    """
    provider_lower = provider.lower()

    if "api_key" not in config:
        raise TypeError(f"{provider} provider requires 'api_key' in config")

    if provider_lower in ("qwen", "dashscope"):
        config.setdefault("base_url", DASHSCOPE_BASE_URL)
        return OpenAICompatibleProvider(**config)

    if provider_lower == "openai":
        config.setdefault("base_url", None)
        return OpenAICompatibleProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'qwen', 'dashscope', 'openai'"
    )
