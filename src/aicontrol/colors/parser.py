"""Color literal parsing and formatting.

Recognized forms, tried in order:

1. History reference: ``历史颜色N``, ``historycolorN``, ``colorhistoryN``
   (case-insensitive, spaces ignored). N is an Arabic number or one of the
   Chinese numerals 一..八, clamped to the current history size.
2. Hex literal: ``#RRGGBB`` or ``#RRGGBBAA``.
3. Functional notation: ``rgb(R,G,B)`` or ``rgba(R,G,B,A)``.
4. Chinese color name, then English color name.
5. Anything else Textual's CSS color parser understands.
"""

import re
from typing import Final

from textual.color import Color as TextualColor
from textual.color import ColorParseError as TextualColorParseError

from ..errors import ColorParseError
from .history import ColorHistory
from .models import Color
from .names import PRESET_DISPLAY_NAMES, lookup_name

HISTORY_PREFIXES: Final[tuple[str, ...]] = ("历史颜色", "historycolor", "colorhistory")

CHINESE_NUMERALS: Final[dict[str, int]] = {
    "一": 1, "二": 2, "三": 3, "四": 4,
    "五": 5, "六": 6, "七": 7, "八": 8,
}

_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(
    r"^(?P<fn>rgba?)\(\s*(?P<r>[\d.]+)\s*,\s*(?P<g>[\d.]+)\s*,\s*(?P<b>[\d.]+)"
    r"\s*(?:,\s*(?P<a>[\d.]+)\s*)?\)$",
    re.IGNORECASE,
)


def is_history_reference(text: str) -> bool:
    """Check whether text names a history entry rather than a color."""
    compact = "".join(text.split()).lower()
    return compact.startswith(HISTORY_PREFIXES)


def parse_history_index(text: str) -> int:
    """Parse a history index from digits or a Chinese numeral.

    Raises:
        ValueError: If the text is not a recognizable index
    """
    token = text.strip()
    if token in CHINESE_NUMERALS:
        return CHINESE_NUMERALS[token]
    return int(token)


def _resolve_history_reference(text: str, history: ColorHistory | None) -> Color:
    compact = "".join(text.split()).lower()
    for prefix in HISTORY_PREFIXES:
        if compact.startswith(prefix):
            compact = compact[len(prefix):]
            break
    compact = compact.replace("历史", "").replace("颜色", "")

    try:
        index = parse_history_index(compact)
    except ValueError:
        raise ColorParseError(text) from None

    if history is None or history.size() == 0:
        raise ColorParseError(text)

    index = max(1, min(index, history.size()))
    return history.get(index)


def _parse_hex(text: str) -> Color | None:
    match = _HEX_RE.match(text)
    if match is None:
        return None
    digits = match.group("digits")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return Color.from_rgb255(r, g, b, alpha)


def _parse_functional(text: str) -> Color | None:
    match = _RGB_RE.match(text)
    if match is None:
        return None
    # rgb() takes exactly three channels, rgba() exactly four
    if (match.group("fn").lower() == "rgba") != (match.group("a") is not None):
        raise ColorParseError(text)
    try:
        channels = [float(match.group(name)) for name in ("r", "g", "b")]
        alpha = float(match.group("a")) if match.group("a") is not None else 1.0
    except ValueError:
        raise ColorParseError(text) from None
    if any(not 0 <= c <= 255 for c in channels) or not 0 <= alpha <= 1:
        raise ColorParseError(text)
    r, g, b = (c / 255 for c in channels)
    return Color(red=r, green=g, blue=b, alpha=alpha)


def _parse_web(text: str) -> Color:
    try:
        parsed = TextualColor.parse(text)
    except TextualColorParseError:
        raise ColorParseError(text) from None
    return Color.from_rgb255(parsed.r, parsed.g, parsed.b, parsed.a)


def parse_color(text: str, history: ColorHistory | None = None) -> Color:
    """Parse a color literal.

    Args:
        text: Color literal in any of the supported forms
        history: Color history used to resolve history references

    Returns:
        Parsed color

    Raises:
        ColorParseError: If the text is not a recognizable color
    """
    if text is None or not str(text).strip():
        raise ColorParseError("" if text is None else str(text))
    stripped = str(text).strip()

    if is_history_reference(stripped):
        return _resolve_history_reference(stripped, history)

    hex_color = _parse_hex(stripped)
    if hex_color is not None:
        return hex_color

    functional = _parse_functional(stripped)
    if functional is not None:
        return functional

    named = lookup_name(stripped)
    if named is not None:
        return named

    return _parse_web(stripped)


def try_parse_color(text: str, history: ColorHistory | None = None) -> Color | None:
    """Parse a color literal, returning None instead of raising."""
    try:
        return parse_color(text, history)
    except ColorParseError:
        return None


def hex_of(color: Color) -> str:
    """Uppercase #RRGGBB form of a color."""
    return color.hex


def display_name(color: Color) -> str:
    """Chinese preset name when the color is a preset, else its hex form."""
    return PRESET_DISPLAY_NAMES.get(color.hex, color.hex)
