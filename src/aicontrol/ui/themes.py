"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Light theme: widgets start on neutral surfaces so commanded colors stand out
CONTROL_LIGHT = Theme(
    name="aicontrol-light",
    primary="#3498db",
    secondary="#9b59b6",
    accent="#f39c12",
    foreground="#2c3e50",
    background="#ecf0f1",
    success="#2ecc71",
    warning="#f39c12",
    error="#e74c3c",
    surface="#ffffff",
    panel="#f4f6f7",
    dark=False,
    variables={
        "input-cursor-background": "#2c3e50",
        "input-cursor-foreground": "#ffffff",
        "input-selection-background": "#3498db 30%",

        "border": "#bdc3c7",
        "border-blurred": "#d5dbdb",

        "scrollbar": "#d5dbdb",
        "scrollbar-hover": "#bdc3c7",
        "scrollbar-active": "#3498db",
        "scrollbar-background": "#f4f6f7",

        "footer-foreground": "#566573",
        "footer-background": "#e5e8e8",
        "footer-key-foreground": "#2980b9",

        "text-muted": "#7f8c8d",
        "text-success": "#27ae60",
        "text-warning": "#d68910",
        "text-error": "#c0392b",
    },
)

# Catppuccin Mocha, kept for users who prefer a dark terminal
CATPPUCCIN_MOCHA = Theme(
    name="catppuccin-mocha",
    primary="#89b4fa",
    secondary="#cba6f7",
    accent="#f9e2af",
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",
    warning="#fab387",
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "input-cursor-background": "#cdd6f4",
        "input-cursor-foreground": "#11111b",
        "input-selection-background": "#89b4fa 30%",

        "border": "#45475a",
        "border-blurred": "#313244",

        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",

        "footer-foreground": "#bac2de",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",

        "text-muted": "#6c7086",
        "text-success": "#a6e3a1",
        "text-warning": "#fab387",
        "text-error": "#f38ba8",
    },
)

THEMES = (CONTROL_LIGHT, CATPPUCCIN_MOCHA)
