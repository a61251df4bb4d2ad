"""Composition of outgoing requests.

Hides the layout of the message list the endpoint receives.
"""

from collections.abc import Iterable

from .models import Message, OutgoingRequest, Role, UserProfile

PROFILE_PREFIX = "User profile: "


def profile_message(profile: UserProfile) -> Message:
    """Synthesize the system message carrying the profile snapshot."""
    return Message(role=Role.SYSTEM, content=f"{PROFILE_PREFIX}{profile.serialize()}")


def compose(
    directive: Message,
    profile: UserProfile,
    tail: Iterable[Message],
) -> OutgoingRequest:
    """Build the request for the current turn.

    The profile snapshot always comes second, right after the directive, so
    it takes precedence over stale mentions in earlier turns. Inputs are
    copied, never modified.

    Args:
        directive: Leading system directive
        profile: Current session profile
        tail: Transcript turns after the directive, oldest first

    Returns:
        OutgoingRequest with ``[directive, profile, *tail]``
    """
    return OutgoingRequest(messages=(directive, profile_message(profile), *tail))
