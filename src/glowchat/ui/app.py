"""Main Textual TUI application.

Orchestrates the UI components and hands submissions to a SessionController.
"""

import asyncio
import logging

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..completion import CompletionClient, start_probe
from ..prompts import get_greeting
from ..session import SessionController, SessionState
from .styles import APP_CSS
from .surface import TUISurface
from .themes import ROSE_GOLD
from .widgets import ChatHistoryWidget, ChatInputBar, LatestQuestion

logger = logging.getLogger(__name__)


class ChatApp(App):
    """Textual TUI for the beauty advisor chat."""

    CSS = APP_CSS
    TITLE = "glowchat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(self, client: CompletionClient, probe: bool = True) -> None:
        super().__init__()
        self._client = client
        self._probe = probe
        self.session: SessionController | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield LatestQuestion("", id="latest-question")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(ROSE_GOLD)
        self.theme = "rose-gold"
        self.sub_title = self._client.endpoint

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        surface = TUISurface(
            chat,
            input_bar,
            self.query_one("#latest-question", LatestQuestion),
        )
        self.session = SessionController(self._client, surface)

        chat.add_message("assistant", get_greeting())
        if self._probe:
            start_probe(self._client)
        input_bar.focus_input()

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._run_cycle(event.value)

    @work(group="session")
    async def _run_cycle(self, user_input: str) -> None:
        """Run one session cycle as a background async worker."""
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        try:
            if self.session is not None:
                await self.session.submit(user_input)
        except Exception as e:
            logger.exception("Session cycle failed")
            chat = self.query_one("#chat-history", ChatHistoryWidget)
            chat.add_message("assistant", f"Error: {e}")
            self.notify(f"Error: {str(e)[:50]}", severity="error", timeout=5)
        finally:
            # The bar locks itself on submit; unlock unless a cycle is still running.
            if self.session is None or self.session.state is SessionState.IDLE:
                input_bar.set_enabled(True)
                input_bar.focus_input()

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(client: CompletionClient, probe: bool = True) -> None:
    """Run the Textual TUI.

    Args:
        client: Completion client the session sends requests through
        probe: Check endpoint connectivity in the background on startup
    """
    app = ChatApp(client=client, probe=probe)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
