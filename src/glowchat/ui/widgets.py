"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat bubble rendering and scrolling
- The transient "Thinking…" indicator
- Input enable/disable while a request is pending
"""

from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, Static

from .formatting import plain, question_preview, role_label

THINKING_TEXT = "Thinking…"


class ChatBubble(Vertical):
    """One rendered chat turn."""

    def __init__(self, role: str, content: str, **kwargs) -> None:
        kind = "user-message" if role == "user" else "assistant-message"
        super().__init__(classes=f"chat-message {kind}", **kwargs)
        self.turn_role = role
        self.turn_text = content
        self.timestamp = datetime.now()

    def compose(self):
        header = f"{role_label(self.turn_role)} [{self.timestamp:%H:%M:%S}]"
        yield Static(plain(header), classes="message-header")
        yield Static(plain(self.turn_text), classes="message-content")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "L'Oréal beauty advisor"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._bubbles: list[ChatBubble] = []
        self._thinking: Static | None = None

    @property
    def bubbles(self) -> list[ChatBubble]:
        return list(self._bubbles)

    def add_message(self, role: str, content: str) -> None:
        """Append a turn and scroll to it.

        Turns always land above the "Thinking…" indicator.
        """
        bubble = ChatBubble(role, content)
        self._bubbles.append(bubble)
        self.mount(bubble, before=self._thinking)
        self.border_subtitle = f"{len(self._bubbles)} messages"
        self.scroll_end(animate=False)

    def show_thinking(self) -> None:
        if self._thinking is None:
            self._thinking = Static(plain(THINKING_TEXT), classes="thinking")
            self.mount(self._thinking)
            self.scroll_end(animate=False)

    def hide_thinking(self) -> None:
        if self._thinking is not None:
            self._thinking.remove()
            self._thinking = None

    def is_thinking(self) -> bool:
        return self._thinking is not None

    def get_last_response(self) -> str | None:
        """Get the last assistant turn shown."""
        for bubble in reversed(self._bubbles):
            if bubble.turn_role == "assistant":
                return bubble.turn_text
        return None


class LatestQuestion(Static):
    """Preview of the most recent question."""

    def show(self, text: str) -> None:
        self.update(question_preview(text))


class ChatInputBar(Horizontal):
    """Chat input bar with Input and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder="Ask about products, routines, or recommendations…", id="chat-input")
        yield Button("Send", id="send-btn", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def _submit(self) -> None:
        """Post the typed text and lock the bar until the app re-enables it.

        While locked, further Enter presses leave the field untouched.
        """
        field = self.query_one("#chat-input", Input)
        if field.disabled:
            return
        value = field.value.strip()
        if value:
            field.value = ""
            self.set_enabled(False)
            self.post_message(self.Submitted(value))

    def set_enabled(self, enabled: bool) -> None:
        self.query_one("#chat-input", Input).disabled = not enabled
        self.query_one("#send-btn", Button).disabled = not enabled

    def is_enabled(self) -> bool:
        return not self.query_one("#chat-input", Input).disabled

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()
