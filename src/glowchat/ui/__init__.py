"""Terminal UI module for glowchat.

Provides a Textual-based TUI for a chat session.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (chat bubbles, pending indicator, input bar)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: Escaping and display text
- surface.py: Session integration (how the TUI receives turns)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_textual_tui
from .surface import TUISurface
from .widgets import ChatHistoryWidget, ChatInputBar, LatestQuestion

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "LatestQuestion",
    "TUISurface",
    "run_textual_tui",
]
