"""Text formatting utilities for chat output.

Every piece of user or endpoint text goes through here before display, so
brackets in a message are shown literally instead of being read as markup.
"""

from rich.markup import escape
from rich.text import Text

ROLE_LABELS = {
    "user": "You",
    "assistant": "Advisor",
}


def role_label(role: str) -> str:
    return ROLE_LABELS.get(role, role.capitalize())


def escape_markup(text: str) -> str:
    """Escape Rich markup so the text renders verbatim."""
    return escape(text)


def plain(text: str) -> Text:
    """Wrap text in a renderable that is never parsed for markup."""
    return Text(text)


def question_preview(text: str) -> Text:
    """Build the "Your question" preview line."""
    return Text.assemble(("Your question: ", "bold"), text)
