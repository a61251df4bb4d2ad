"""Unit tests for the session controller."""
import asyncio

import httpx
import pytest

from glowchat.completion import EndpointError, TransportError
from glowchat.conversation import Message, Role
from glowchat.prompts import get_directive
from glowchat.session import CycleOutcome, SessionController, SessionState

from conftest import TEST_DIRECTIVE, FakeCompletionClient

ACK_ANNA = "Nice to meet you, Anna! I'll remember your name for this session."


def make_session(client, surface) -> SessionController:
    return SessionController(client, surface, directive=TEST_DIRECTIVE)


class TestSubmitSuccess:
    """Tests for the successful cycle."""

    @pytest.mark.asyncio
    async def test_appends_user_then_assistant(self, fake_client, surface):
        """Test that a successful cycle adds exactly two turns."""
        session = make_session(fake_client, surface)
        before = len(session.transcript)

        outcome = await session.submit("Which cleanser for oily skin?")

        assert outcome is CycleOutcome.COMPLETED
        assert len(session.transcript) == before + 2
        user, assistant = session.transcript.turns()[-2:]
        assert user == Message(role=Role.USER, content="Which cleanser for oily skin?")
        assert assistant == Message(role=Role.ASSISTANT, content="Use X twice daily.")

    @pytest.mark.asyncio
    async def test_input_is_trimmed(self, fake_client, surface):
        session = make_session(fake_client, surface)

        await session.submit("   hello   ")

        assert session.transcript.turns()[0].content == "hello"

    @pytest.mark.asyncio
    async def test_event_order(self, fake_client, surface):
        """Test the order in which the surface is driven."""
        session = make_session(fake_client, surface)

        await session.submit("hello")

        assert surface.events == [
            ("input", False),
            ("latest", "hello"),
            ("render", "user", "hello"),
            ("pending",),
            ("clear",),
            ("render", "assistant", "Use X twice daily."),
            ("clear",),
            ("input", True),
        ]
        assert session.state is SessionState.IDLE

    @pytest.mark.asyncio
    async def test_request_includes_new_turn(self, fake_client, surface):
        """Test that the request carries directive, profile and the new user turn."""
        session = make_session(fake_client, surface)

        await session.submit("first question")
        await session.submit("second question")

        request = fake_client.requests[-1]
        assert request.messages[0] == Message(role=Role.SYSTEM, content=TEST_DIRECTIVE)
        assert request.messages[1].content == 'User profile: {"name":null}'
        assert [m.content for m in request.messages[2:]] == [
            "first question",
            "Use X twice daily.",
            "second question",
        ]

    @pytest.mark.asyncio
    async def test_default_directive_loaded_from_prompts(self, fake_client, surface):
        session = SessionController(fake_client, surface)

        assert session.transcript.directive().content == get_directive()
        assert session.transcript.directive().content.startswith(
            "You are a knowledgeable assistant"
        )

    @pytest.mark.asyncio
    async def test_empty_worker_body_gives_visible_turn(self, worker_factory, surface):
        """Test that an empty 200 from the worker still renders an answer."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"")

        async with worker_factory(handler) as client:
            session = make_session(client, surface)
            outcome = await session.submit("hello")

        assert outcome is CycleOutcome.COMPLETED
        role, text = surface.rendered[-1]
        assert role == "assistant"
        assert text == "Empty response from worker (200)"


class TestProfileHandling:
    """Tests for name detection inside the cycle."""

    @pytest.mark.asyncio
    async def test_name_acknowledged_before_user_turn(self, fake_client, surface):
        session = make_session(fake_client, surface)

        await session.submit("Hi, my name is Anna")

        roles_and_text = [(m.role, m.content) for m in session.transcript.turns()]
        assert roles_and_text == [
            (Role.ASSISTANT, ACK_ANNA),
            (Role.USER, "Hi, my name is Anna"),
            (Role.ASSISTANT, "Use X twice daily."),
        ]
        assert session.profile.name == "Anna"

    @pytest.mark.asyncio
    async def test_updated_profile_in_triggering_request(self, fake_client, surface):
        session = make_session(fake_client, surface)

        await session.submit("I'm Anna")

        assert fake_client.requests[0].messages[1].content == 'User profile: {"name":"Anna"}'

    @pytest.mark.asyncio
    async def test_different_name_acknowledged_once(self, fake_client, surface):
        session = make_session(fake_client, surface)
        await session.submit("my name is Anna")
        before = len(session.transcript)

        await session.submit("call me Ana")

        assert session.profile.name == "Ana"
        acks = [m for m in session.transcript.turns() if m.content.startswith("Nice to meet you")]
        assert len(acks) == 2
        assert len(session.transcript) == before + 3

    @pytest.mark.asyncio
    async def test_same_name_other_case_not_acknowledged(self, fake_client, surface):
        session = make_session(fake_client, surface)
        await session.submit("my name is Anna")
        before = len(session.transcript)

        await session.submit("call me ANNA")

        assert session.profile.name == "Anna"
        assert len(session.transcript) == before + 2

    @pytest.mark.asyncio
    async def test_profile_property_is_a_copy(self, fake_client, surface):
        session = make_session(fake_client, surface)
        await session.submit("my name is Anna")

        snapshot = session.profile
        snapshot.name = "Mallory"

        assert session.profile.name == "Anna"


class TestSubmitFailures:
    """Tests for failed cycles."""

    @pytest.mark.asyncio
    async def test_endpoint_error_rendered_not_stored(self, surface):
        client = FakeCompletionClient(EndpointError(500, "server overloaded"))
        session = make_session(client, surface)
        before = len(session.transcript)

        outcome = await session.submit("hello")

        assert outcome is CycleOutcome.ENDPOINT_ERROR
        assert len(session.transcript) == before + 1
        role, text = surface.rendered[-1]
        assert role == "assistant"
        assert "500" in text
        assert "server overloaded" in text
        assert surface.input_enabled is True
        assert surface.pending is False

    @pytest.mark.asyncio
    async def test_transport_error_rendered_not_stored(self, surface):
        client = FakeCompletionClient(TransportError("connection refused"))
        session = make_session(client, surface)
        before = len(session.transcript)

        outcome = await session.submit("hello")

        assert outcome is CycleOutcome.TRANSPORT_ERROR
        assert len(session.transcript) == before + 1
        assert surface.rendered[-1] == ("assistant", "Network error: connection refused")
        assert surface.input_enabled is True

    @pytest.mark.asyncio
    async def test_retry_after_failure_starts_clean(self, surface):
        client = FakeCompletionClient(TransportError("down"), "Back online.")
        session = make_session(client, surface)

        await session.submit("first try")
        await session.submit("second try")

        assert [m.content for m in client.requests[1].messages[2:]] == ["first try", "second try"]
        assert session.transcript.turns()[-1].content == "Back online."

    @pytest.mark.asyncio
    async def test_unexpected_error_still_restores_input(self, surface):
        client = FakeCompletionClient(RuntimeError("bug"))
        session = make_session(client, surface)

        with pytest.raises(RuntimeError):
            await session.submit("hello")

        assert session.state is SessionState.IDLE
        assert surface.input_enabled is True
        assert surface.pending is False

        # Session remains usable
        client.replies = ["recovered"]
        assert await session.submit("again") is CycleOutcome.COMPLETED


class TestAdmission:
    """Tests for input rejection and the single outstanding request."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_input_rejected(self, fake_client, surface, text):
        session = make_session(fake_client, surface)

        assert await session.submit(text) is CycleOutcome.REJECTED
        assert surface.events == []
        assert fake_client.requests == []
        assert len(session.transcript) == 1

    @pytest.mark.asyncio
    async def test_double_submit_rejected(self, fake_client, surface):
        fake_client.gate = asyncio.Event()
        session = make_session(fake_client, surface)

        first = asyncio.create_task(session.submit("first"))
        while not fake_client.requests:
            await asyncio.sleep(0)

        assert session.state is SessionState.SUBMITTING
        assert surface.input_enabled is False
        assert await session.submit("second") is CycleOutcome.REJECTED

        fake_client.gate.set()
        assert await first is CycleOutcome.COMPLETED

        assert len(fake_client.requests) == 1
        user_turns = [m for m in session.transcript.turns() if m.role is Role.USER]
        assert [m.content for m in user_turns] == ["first"]

    @pytest.mark.asyncio
    async def test_sessions_are_independent(self, surface):
        first = make_session(FakeCompletionClient("a"), surface)
        second = make_session(FakeCompletionClient("b"), surface)

        await first.submit("my name is Anna")

        assert second.profile.name is None
        assert len(second.transcript) == 1
