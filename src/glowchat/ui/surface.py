"""Session surface backed by the TUI widgets.

Hides how the session's render and input calls map onto widgets. The
session runs as an async worker on the app's event loop, so widgets are
updated directly.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .widgets import ChatHistoryWidget, ChatInputBar, LatestQuestion


class TUISurface:
    """ChatSurface implementation for the Textual app."""

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        input_bar: "ChatInputBar",
        latest: "LatestQuestion | None" = None,
    ) -> None:
        self.chat = chat
        self.input_bar = input_bar
        self.latest = latest

    def render_turn(self, role: str, text: str) -> None:
        self.chat.add_message(role, text)

    def show_pending(self) -> None:
        self.chat.show_thinking()

    def clear_pending(self) -> None:
        self.chat.hide_thinking()

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_bar.set_enabled(enabled)
        if enabled:
            self.input_bar.focus_input()

    def show_latest_question(self, text: str) -> None:
        if self.latest is not None:
            self.latest.show(text)
