"""Data models for the conversation pipeline.

These models define messages, the session profile and the outgoing request,
independent of how they are rendered or sent over the wire.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Sender of a message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender")
    content: str = Field(description="Content of the message")


class UserProfile(BaseModel):
    """Facts about the user gathered during the session.

    Lives only as long as the session; never persisted.
    """

    name: str | None = Field(default=None, description="Self-identified user name")

    def serialize(self) -> str:
        """Compact JSON snapshot, e.g. ``{"name":"Anna"}``."""
        return self.model_dump_json()


class ExtractedFact(BaseModel):
    """A profile fact detected in user text."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Profile field the fact belongs to")
    value: str = Field(min_length=2, max_length=30, description="Detected value")
    pattern: str = Field(description="Label of the pattern that matched")


class OutgoingRequest(BaseModel):
    """Request body sent to the completion endpoint."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...]

    def to_payload(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return self.model_dump(mode="json")
