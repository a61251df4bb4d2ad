"""Conversation state for a chat session.

Transcript, profile extraction and request composition.
"""

from .builder import compose, profile_message
from .models import ExtractedFact, Message, OutgoingRequest, Role, UserProfile
from .profile import DEFAULT_NAME_PATTERNS, NamePattern, ProfileExtractor
from .transcript import TranscriptStore

__all__ = [
    "DEFAULT_NAME_PATTERNS",
    "ExtractedFact",
    "Message",
    "NamePattern",
    "OutgoingRequest",
    "ProfileExtractor",
    "Role",
    "TranscriptStore",
    "UserProfile",
    "compose",
    "profile_message",
]
