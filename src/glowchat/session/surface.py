"""Interface between a session and whatever displays it.

Hides how turns reach the user. Implementations escape text themselves
before it reaches any markup-aware renderer.
"""

from typing import Protocol


class ChatSurface(Protocol):
    """Display and input affordances a session drives."""

    def render_turn(self, role: str, text: str) -> None:
        """Show one chat turn (``user`` or ``assistant``)."""

    def show_pending(self) -> None:
        """Show the transient in-progress indicator."""

    def clear_pending(self) -> None:
        """Remove the in-progress indicator. Safe to call when none is shown."""

    def set_input_enabled(self, enabled: bool) -> None:
        """Enable or disable text entry and submission."""

    def show_latest_question(self, text: str) -> None:
        """Replace the preview of the most recent question."""
