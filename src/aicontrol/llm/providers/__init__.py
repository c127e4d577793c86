from .openai import DASHSCOPE_BASE_URL, DEFAULT_MODEL, OpenAICompatibleProvider

__all__ = ["DASHSCOPE_BASE_URL", "DEFAULT_MODEL", "OpenAICompatibleProvider"]
