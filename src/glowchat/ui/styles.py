"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    border-left: tall $primary;
    margin-left: 8;

    & .message-header {
        color: $primary;
    }
}

.assistant-message {
    border-left: tall $secondary;
    margin-right: 8;

    & .message-header {
        color: $secondary;
    }
}

.message-header {
    text-style: bold;
    height: 1;
}

.message-content {
    height: auto;
}

.thinking {
    height: auto;
    margin: 1 0 0 1;
    color: $warning;
    text-style: italic;
}

/* ============================================
   Latest Question Preview
   ============================================ */
#latest-question {
    height: auto;
    padding: 0 2;
    color: $text-muted;
}

/* ============================================
   Input Bar
   ============================================ */
#chat-input-bar {
    height: auto;
    padding: 0 1;
}

#chat-input {
    width: 1fr;
    border: tall $border;

    &:focus {
        border: tall $primary;
    }

    &:disabled {
        opacity: 60%;
    }
}

#send-btn {
    min-width: 10;
    margin-left: 1;
}
"""
