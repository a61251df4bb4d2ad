"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Warm rose-gold palette on a dark plum background
ROSE_GOLD = Theme(
    name="rose-gold",
    primary="#e8a0a8",      # Rose - user bubbles, focus
    secondary="#d4af7a",    # Gold - assistant bubbles
    accent="#f2d0a9",       # Champagne - highlights
    foreground="#f4e9e6",   # Light text
    background="#1a1217",   # Deep plum
    success="#a8d5ba",      # Mint
    warning="#f3c178",      # Amber - pending indicator
    error="#e57373",        # Red - error turns
    surface="#241a20",
    panel="#1f161b",
    dark=True,
    variables={
        "input-cursor-background": "#f4e9e6",
        "input-cursor-foreground": "#1a1217",
        "input-selection-background": "#e8a0a8 30%",
        "border": "#4a3640",
        "border-blurred": "#33252d",
        "scrollbar": "#33252d",
        "scrollbar-hover": "#4a3640",
        "scrollbar-active": "#e8a0a8",
        "scrollbar-background": "#1f161b",
    },
)
