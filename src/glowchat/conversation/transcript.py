"""Append-only conversation transcript.

Hides how the history is stored. The directive is fixed at index 0 and
cannot be removed, duplicated or moved.
"""

from .models import Message, Role


class TranscriptStore:
    """Ordered history of a session, headed by the system directive."""

    def __init__(self, directive: str):
        self._messages: list[Message] = [Message(role=Role.SYSTEM, content=directive)]

    def append(self, role: Role | str, content: str) -> Message:
        """Add a turn to the end of the transcript.

        Args:
            role: ``user`` or ``assistant``
            content: Turn text

        Returns:
            The stored message

        Raises:
            ValueError: If role is ``system`` or not a known role
        """
        role = Role(role)
        if role is Role.SYSTEM:
            raise ValueError("The transcript holds exactly one system message")
        message = Message(role=role, content=content)
        self._messages.append(message)
        return message

    def snapshot(self) -> tuple[Message, ...]:
        """Immutable copy of the full transcript, directive first."""
        return tuple(self._messages)

    def directive(self) -> Message:
        return self._messages[0]

    def turns(self) -> tuple[Message, ...]:
        """User and assistant turns, without the directive."""
        return tuple(self._messages[1:])

    def __len__(self) -> int:
        return len(self._messages)
