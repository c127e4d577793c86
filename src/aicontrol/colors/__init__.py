"""Color model for aicontrol.

Module structure:
- models.py: RGBA color value and derived quantities
- names.py: Chinese/English name tables and presets
- parser.py: literal parsing and display formatting
- history.py: recently used colors with observers
"""

from .history import DEFAULT_CAPACITY, ColorHistory
from .models import Color
from .names import (
    CHINESE_COLOR_NAMES,
    ENGLISH_COLOR_NAMES,
    PRESET_COLORS,
    PRESET_DISPLAY_NAMES,
    PRESET_NAMES,
)
from .parser import (
    display_name,
    hex_of,
    is_history_reference,
    parse_color,
    parse_history_index,
    try_parse_color,
)

__all__ = [
    "CHINESE_COLOR_NAMES",
    "Color",
    "ColorHistory",
    "DEFAULT_CAPACITY",
    "ENGLISH_COLOR_NAMES",
    "PRESET_COLORS",
    "PRESET_DISPLAY_NAMES",
    "PRESET_NAMES",
    "display_name",
    "hex_of",
    "is_history_reference",
    "parse_color",
    "parse_history_index",
    "try_parse_color",
]
