"""Session configuration.

Centralizes where the API key comes from and the request defaults.

Sources, in order:
1. Environment variable QWEN_API_KEY
2. Process property qwen.api.key, set with set_property by a program that
   embeds the launcher (see aicontrol.cli.app)

There are no configuration files and no command-line flags.
"""

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .llm.providers import DASHSCOPE_BASE_URL, DEFAULT_MODEL

API_KEY_ENV: Final = "QWEN_API_KEY"
API_KEY_PROPERTY: Final = "qwen.api.key"

_process_properties: dict[str, str] = {}


def set_property(name: str, value: str) -> None:
    """Set a process property for the rest of this process's lifetime."""
    _process_properties[name] = value


def get_property(name: str, default: str | None = None) -> str | None:
    return _process_properties.get(name, default)


def clear_property(name: str) -> None:
    """Forget a process property, for example once a launcher is done with it."""
    _process_properties.pop(name, None)


class Settings(BaseModel):
    """Resolved session settings."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Bearer token, None when absent")
    model: str = Field(default=DEFAULT_MODEL)
    base_url: str = Field(default=DASHSCOPE_BASE_URL)
    request_timeout: float = Field(default=60.0, gt=0)
    handshake_timeout: float = Field(default=10.0, gt=0)

    @property
    def has_credentials(self) -> bool:
        return self.api_key is not None


def _clean(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def resolve_api_key(
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> str | None:
    """Find the API key, or None when neither source provides one."""
    env = os.environ if environ is None else environ
    props = _process_properties if properties is None else properties
    return _clean(env.get(API_KEY_ENV)) or _clean(props.get(API_KEY_PROPERTY))


def load_settings(
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> Settings:
    """Build the session settings from the environment and process properties."""
    return Settings(api_key=resolve_api_key(environ, properties))
