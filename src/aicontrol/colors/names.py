"""Named color tables.

Names resolve to web color values. Lookups are case-insensitive; Chinese
names are matched verbatim after trimming.
"""

from typing import Final

from .models import Color

_WEB_VALUES: Final[dict[str, tuple[int, int, int]]] = {
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "green": (0, 128, 0),
    "yellow": (255, 255, 0),
    "purple": (128, 0, 128),
    "orange": (255, 165, 0),
    "pink": (255, 192, 203),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "gray": (128, 128, 128),
    "darkblue": (0, 0, 139),
    "lightblue": (173, 216, 230),
}

ENGLISH_COLOR_NAMES: Final[dict[str, Color]] = {
    name: Color.from_rgb255(*rgb) for name, rgb in _WEB_VALUES.items()
}

CHINESE_COLOR_NAMES: Final[dict[str, Color]] = {
    "红色": ENGLISH_COLOR_NAMES["red"],
    "蓝色": ENGLISH_COLOR_NAMES["blue"],
    "绿色": ENGLISH_COLOR_NAMES["green"],
    "黄色": ENGLISH_COLOR_NAMES["yellow"],
    "紫色": ENGLISH_COLOR_NAMES["purple"],
    "橙色": ENGLISH_COLOR_NAMES["orange"],
    "粉色": ENGLISH_COLOR_NAMES["pink"],
    "黑色": ENGLISH_COLOR_NAMES["black"],
    "白色": ENGLISH_COLOR_NAMES["white"],
    "灰色": ENGLISH_COLOR_NAMES["gray"],
    "深蓝": ENGLISH_COLOR_NAMES["darkblue"],
    "浅蓝": ENGLISH_COLOR_NAMES["lightblue"],
}

# Colors offered as one-click presets, in display order. Preset green is the
# full-intensity #00FF00, unlike the named web green.
PRESET_NAMES: Final[tuple[str, ...]] = (
    "红色", "绿色", "蓝色", "黄色", "橙色",
    "紫色", "粉色", "黑色", "白色", "灰色",
)

_PRESET_OVERRIDES: Final[dict[str, Color]] = {
    "绿色": Color.from_rgb255(0, 255, 0),
}

_PRESETS: Final[tuple[tuple[str, Color], ...]] = tuple(
    (name, _PRESET_OVERRIDES.get(name, CHINESE_COLOR_NAMES[name])) for name in PRESET_NAMES
)

PRESET_COLORS: Final[dict[str, Color]] = {color.hex: color for _, color in _PRESETS}

# Hex -> Chinese name, covering the presets and the named table
PRESET_DISPLAY_NAMES: Final[dict[str, str]] = {
    **{color.hex: name for name, color in CHINESE_COLOR_NAMES.items()},
    **{color.hex: name for name, color in _PRESETS},
}


def lookup_name(name: str) -> Color | None:
    """Resolve a Chinese or English color name, or None."""
    key = name.strip()
    if key in CHINESE_COLOR_NAMES:
        return CHINESE_COLOR_NAMES[key]
    return ENGLISH_COLOR_NAMES.get(key.lower().replace(" ", ""))
