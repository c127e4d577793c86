"""Pytest configuration and shared fixtures."""
import asyncio
import json
from collections.abc import Iterable
from typing import Any

import httpx
import pytest

from aicontrol.colors import Color, ColorHistory
from aicontrol.commands import ColorSelectionPipeline, CommandDispatcher
from aicontrol.conversation import ConversationView
from aicontrol.llm import ChatMessage, LLMProvider, LLMResponse, OpenAICompatibleProvider
from aicontrol.prompts import clear_cache
from aicontrol.widgets import Capability, WidgetMutator, WidgetRegistry, WidgetSurface

BOX = {Capability.VISIBILITY, Capability.BACKGROUND, Capability.STYLE}
TEXT_WIDGET = BOX | {Capability.TEXT, Capability.FOREGROUND}
PICKER = {Capability.VISIBILITY, Capability.STYLE, Capability.COLOR_PICKER}


class FakeSurface(WidgetSurface):
    """In-memory widget that records every mutation."""

    def __init__(
        self,
        capabilities: Iterable[Capability],
        text: str = "",
        label: str | None = None,
        style: str = "",
        picker_value: Color | None = None,
    ) -> None:
        self._capabilities = frozenset(capabilities)
        self._label = label
        self.visible = True
        self.text = text
        self.style = style
        self.picker_value = picker_value
        self.visibility_calls = 0

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self._capabilities

    @property
    def label(self) -> str | None:
        return self._label

    def is_visible(self) -> bool:
        return self.visible

    def set_visible(self, visible: bool) -> None:
        self.visibility_calls += 1
        self.visible = visible

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_style(self) -> str:
        return self.style

    def set_style(self, style: str) -> None:
        self.style = style

    def get_picker_value(self) -> Color:
        return self.picker_value

    def set_picker_value(self, color: Color) -> None:
        self.picker_value = color


def make_default_surfaces() -> dict[str, FakeSurface]:
    """Fake surfaces for the ten default widgets, typed like the TUI's."""
    return {
        "btn1": FakeSurface(TEXT_WIDGET, text="Button 1", label="Button 1"),
        "btn2": FakeSurface(TEXT_WIDGET, text="Button 2", label="Button 2"),
        "sampleText": FakeSurface(TEXT_WIDGET, text="Sample text"),
        "colorPicker": FakeSurface(PICKER, picker_value=Color.from_rgb255(255, 255, 255)),
        "titleLabel": FakeSurface(TEXT_WIDGET, text="AI Control Panel", label="AI Control Panel"),
        "chatArea": FakeSurface(BOX),
        "controlPanel": FakeSurface(BOX),
        "statusLabel": FakeSurface(TEXT_WIDGET),
        "commandInput": FakeSurface(TEXT_WIDGET),
        "executeButton": FakeSurface(TEXT_WIDGET, text="Execute", label="Execute"),
    }


def completion_body(content: str, model: str = "qwen-max") -> dict[str, Any]:
    """A chat-completions response body carrying ``content``."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def completion(content: str) -> LLMResponse:
    """An LLMResponse as the OpenAI-compatible provider would build it."""
    return LLMResponse(content=content, model="qwen-max", raw=completion_body(content))


def command_completion(
    command: str,
    target: str = "",
    params: dict[str, Any] | None = None,
    description: str = "",
) -> LLMResponse:
    envelope = {
        "command": command,
        "target": target,
        "params": params or {},
        "description": description,
    }
    return completion(json.dumps(envelope, ensure_ascii=False))


def json_response(body: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json=body)


def http_provider(
    *replies: httpx.Response | Exception,
) -> tuple[OpenAICompatibleProvider, list[httpx.Request]]:
    """An OpenAICompatibleProvider whose HTTP traffic is answered from ``replies``.

    Exceptions in ``replies`` are raised by the transport, as a refused
    connection would be. Returns the provider and the list of requests seen.
    """
    queue = list(replies)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    provider = OpenAICompatibleProvider(
        api_key="sk-test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return provider, seen


class FakeProvider(LLMProvider):
    """Provider replaying queued responses (or raising queued exceptions).

    Each queued item may be a (delay, item) tuple to simulate a slow reply.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[list[ChatMessage]] = []
        self.timeouts: list[float | None] = []
        self.closed = False

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        timeout: float | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.requests.append(list(messages))
        self.timeouts.append(timeout)
        if not self.responses:
            raise AssertionError("unexpected request")
        item = self.responses.pop(0)
        if isinstance(item, tuple):
            delay, item = item
            await asyncio.sleep(delay)
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True

    def user_messages(self) -> list[str]:
        return [
            message.content
            for request in self.requests
            for message in request
            if message.role == "user"
        ]


@pytest.fixture(autouse=True)
def _fresh_prompts():
    """Reload prompt files for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def surfaces():
    return make_default_surfaces()


@pytest.fixture
def registry(surfaces):
    registry = WidgetRegistry()
    for widget_id, surface in surfaces.items():
        registry.register(widget_id, surface)
    return registry


@pytest.fixture
def history():
    return ColorHistory()


@pytest.fixture
def view():
    return ConversationView()


@pytest.fixture
def mutator(registry):
    return WidgetMutator(registry)


@pytest.fixture
def pipeline(registry, mutator, history, view):
    pipeline = ColorSelectionPipeline(registry, mutator, history, view)
    mutator.set_selection_hook(pipeline.select)
    return pipeline


@pytest.fixture
def dispatcher(mutator, history, view, pipeline):
    return CommandDispatcher(mutator, history, view, pipeline)
