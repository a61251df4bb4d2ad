"""Session surface that prints to a Rich console.

Used by the line-oriented ``chat`` command. Input is read between cycles,
so disabling it only has to stop the prompt from being shown mid-call.
"""

from rich.console import Console
from rich.status import Status

from ..ui.formatting import escape_markup, role_label

ROLE_STYLES = {
    "user": "bold cyan",
    "assistant": "bold magenta",
}


class ConsoleSurface:
    """ChatSurface implementation for a Rich console."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self.input_enabled = True
        self._status: Status | None = None

    def render_turn(self, role: str, text: str) -> None:
        # The terminal already shows what the user typed.
        if role == "user":
            return
        style = ROLE_STYLES.get(role, "bold")
        self.console.print(f"[{style}]{role_label(role)}:[/{style}] {escape_markup(text)}\n")

    def show_pending(self) -> None:
        if self._status is None:
            self._status = self.console.status("[dim]Thinking…[/dim]")
            self._status.start()

    def clear_pending(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled

    def show_latest_question(self, text: str) -> None:
        pass
