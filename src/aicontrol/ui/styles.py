"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Only theme-level styling lives here. Colors applied by commands are inline
styles on individual widgets and always win over these rules.
"""

APP_CSS = """
/* ============================================
   Main Layout - Control Panel | Conversation
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

#main {
    height: 1fr;
}

/* ============================================
   Control Panel - The Widgets Under Control
   ============================================ */
#controlPanel {
    width: 2fr;
    height: 100%;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    padding: 0 1;
    overflow-y: auto;
}

#titleLabel {
    width: 100%;
    content-align: center middle;
    text-style: bold;
    padding: 1 0;
}

#button-row {
    height: auto;
    margin-bottom: 1;

    Button {
        margin-right: 1;
    }
}

#sampleText {
    margin-bottom: 1;
}

/* ============================================
   Color Picker + Presets + History
   ============================================ */
ColorPickerField {
    height: auto;
    margin-bottom: 1;

    #picker-swatch {
        width: 6;
        height: 3;
        border: tall $border;
    }

    #picker-input {
        width: 1fr;
    }
}

.section-title {
    color: $text-muted;
    text-style: bold;
}

PresetBar, HistoryStrip {
    height: auto;
    margin-bottom: 1;
}

PresetButton {
    min-width: 6;
    width: 6;
    margin-right: 1;
    border: none;
}

Swatch {
    width: 4;
    height: 2;
    margin-right: 1;

    &:hover {
        border: tall $accent;
    }
}

.history-empty {
    color: $text-muted;
    text-style: italic;
}

/* ============================================
   Conversation Panel
   ============================================ */
#conversation {
    width: 3fr;
    height: 100%;
}

#chatArea {
    height: 1fr;
    background: $surface;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $secondary;
    }
}

#statusLabel {
    height: 1;
    padding: 0 1;
    text-style: bold;

    &.-green { color: $success; }
    &.-orange { color: $warning; }
    &.-red { color: $error; }
    &.-neutral { color: $foreground; }
}

#command-bar {
    height: auto;

    #commandInput {
        width: 1fr;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}
"""
