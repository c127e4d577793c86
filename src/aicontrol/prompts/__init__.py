"""Prompt management module.

Externalizes prompts to text files so they can be iterated on without
touching code. Prompts can be overridden by placing files in the working
directory.
"""

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from string import Template

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

# Descriptions shown next to well-known widget identifiers
WIDGET_DESCRIPTIONS = {
    "btn1": "按钮1 (button one)",
    "btn2": "按钮2 (button two)",
    "sampleText": "文本框 (sample text field)",
    "colorPicker": "颜色选择器 (color picker)",
    "titleLabel": "标题标签 (title label)",
    "chatArea": "聊天区域 (chat area)",
    "controlPanel": "控制面板 (control panel)",
    "statusLabel": "状态标签 (status label)",
    "commandInput": "指令输入框 (command input)",
    "executeButton": "执行按钮 (execute button)",
}


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: aicontrol/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8")

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8")

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def format_targets(identifiers: Iterable[str]) -> str:
    """Render the registered identifiers as a bullet list for the prompt."""
    lines = []
    for widget_id in identifiers:
        description = WIDGET_DESCRIPTIONS.get(widget_id)
        lines.append(f"- {widget_id}: {description}" if description else f"- {widget_id}")
    return "\n".join(lines)


def get_command_prompt(identifiers: Iterable[str]) -> str:
    """Get the system prompt that turns requests into command envelopes."""
    template = Template(load_prompt("command"))
    return template.safe_substitute(targets=format_targets(identifiers))


def get_handshake_prompt() -> str:
    """Get the system prompt used to verify the endpoint answers."""
    return load_prompt("handshake").strip()


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "WIDGET_DESCRIPTIONS",
    "clear_cache",
    "format_targets",
    "get_command_prompt",
    "get_handshake_prompt",
    "load_prompt",
]
