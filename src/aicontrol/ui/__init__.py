"""Terminal UI module for aicontrol.

Provides a Textual-based TUI hosting the controllable widgets.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (transcript, status, color picker, swatches, log)
- formatting.py: Transcript rendering
- surfaces.py: Widget Surface adapters and style dialect translation
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- callbacks.py: Session integration (scheduling, debug routing)
- app.py: Application orchestration (user interaction flow)
"""

from .app import AIControlApp, run_textual_tui
from .callbacks import TUIScheduler, make_debug_callback
from .config import LogLevel
from .surfaces import register_widgets, surface_for, to_textual_declarations
from .widgets import ChatArea, ColorPickerField, DebugPanel, HistoryStrip, StatusLabel

__all__ = [
    "AIControlApp",
    "ChatArea",
    "ColorPickerField",
    "DebugPanel",
    "HistoryStrip",
    "LogLevel",
    "StatusLabel",
    "TUIScheduler",
    "make_debug_callback",
    "register_widgets",
    "run_textual_tui",
    "surface_for",
    "to_textual_declarations",
]
