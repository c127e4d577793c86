"""Widget registry and mutation engine.

Module structure:
- base.py: Widget Surface interface and capability set
- registry.py: identifier to widget mapping
- styles.py: inline style merging for color mutations
- mutator.py: typed mutations applied through surfaces
"""

from .base import CAPABILITY_LABELS, Capability, WidgetSurface
from .mutator import SelectionHook, WidgetMutator
from .registry import DEFAULT_WIDGET_IDS, WidgetHandle, WidgetRegistry
from .styles import (
    COLOR_PROPERTIES,
    join_declarations,
    merge_background,
    merge_foreground,
    parse_declarations,
    style_value,
)

__all__ = [
    "CAPABILITY_LABELS",
    "COLOR_PROPERTIES",
    "Capability",
    "DEFAULT_WIDGET_IDS",
    "SelectionHook",
    "WidgetHandle",
    "WidgetMutator",
    "WidgetRegistry",
    "WidgetSurface",
    "join_declarations",
    "merge_background",
    "merge_foreground",
    "parse_declarations",
    "style_value",
]
