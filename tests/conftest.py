"""Pytest configuration and shared fixtures."""
import asyncio
import os

import httpx
import pytest

from glowchat.completion import CompletionClient, WorkerCompletionClient
from glowchat.conversation import OutgoingRequest

TEST_DIRECTIVE = "Only talk about L'Oréal products."
WORKER_URL = "https://worker.test/"


class FakeCompletionClient(CompletionClient):
    """In-memory client that records requests and replays scripted results.

    Each entry of ``replies`` is either text to return or an exception to
    raise. The last entry repeats once the script runs out.
    """

    def __init__(self, *replies: str | BaseException) -> None:
        self.replies = list(replies) or ["ok"]
        self.requests: list[OutgoingRequest] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    @property
    def endpoint(self) -> str:
        return "fake://worker"

    async def send(self, request: OutgoingRequest) -> str:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


class RecordingSurface:
    """ChatSurface that records every call in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.input_enabled = True
        self.pending = False

    def render_turn(self, role: str, text: str) -> None:
        self.events.append(("render", role, text))

    def show_pending(self) -> None:
        self.pending = True
        self.events.append(("pending",))

    def clear_pending(self) -> None:
        self.pending = False
        self.events.append(("clear",))

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled
        self.events.append(("input", enabled))

    def show_latest_question(self, text: str) -> None:
        self.events.append(("latest", text))

    @property
    def rendered(self) -> list[tuple[str, str]]:
        return [(e[1], e[2]) for e in self.events if e[0] == "render"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def fake_client():
    return FakeCompletionClient("Use X twice daily.")


@pytest.fixture
def worker_factory():
    """Build WorkerCompletionClients backed by an httpx.MockTransport handler."""
    def _make(handler) -> WorkerCompletionClient:
        return WorkerCompletionClient(WORKER_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture(scope="session")
def worker_url():
    """Real worker URL for integration tests, if configured."""
    return os.getenv("GLOWCHAT_WORKER_URL")
