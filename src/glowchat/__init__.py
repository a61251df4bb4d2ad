"""
glowchat: a single-session beauty advisor chat client.

The package is split so that each module hides one design decision:
conversation state, the completion transport, the session cycle and the
user interfaces around it.
"""

__version__ = "0.1.0"

from .completion import (
    CallError,
    CompletionClient,
    EndpointError,
    TransportError,
    WorkerCompletionClient,
)
from .conversation import (
    Message,
    OutgoingRequest,
    ProfileExtractor,
    Role,
    TranscriptStore,
    UserProfile,
    compose,
)
from .session import ChatSurface, CycleOutcome, SessionController, SessionState

__all__ = [
    "CallError",
    "ChatSurface",
    "CompletionClient",
    "CycleOutcome",
    "EndpointError",
    "Message",
    "OutgoingRequest",
    "ProfileExtractor",
    "Role",
    "SessionController",
    "SessionState",
    "TranscriptStore",
    "TransportError",
    "UserProfile",
    "WorkerCompletionClient",
    "compose",
]
