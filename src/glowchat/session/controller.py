"""Submit-to-render cycle for one chat session.

Hides the order in which the pipeline runs and how failures are surfaced.
The session owns its transcript and profile; nothing is shared between
sessions.
"""

import logging
from enum import Enum

from ..completion.base import CompletionClient
from ..completion.errors import EndpointError, TransportError
from ..conversation.builder import compose
from ..conversation.models import Role, UserProfile
from ..conversation.profile import ProfileExtractor
from ..conversation.transcript import TranscriptStore
from ..prompts import format_acknowledgment, get_directive
from .surface import ChatSurface

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Whether a request is outstanding."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class CycleOutcome(str, Enum):
    """How a submission ended."""

    REJECTED = "rejected"
    COMPLETED = "completed"
    ENDPOINT_ERROR = "endpoint_error"
    TRANSPORT_ERROR = "transport_error"


class SessionController:
    """Drives one chat session against a completion client.

    At most one request is outstanding: a submission arriving while another
    is in flight is rejected, and the surface's input stays disabled for
    the duration of a call.

    Usage:
        session = SessionController(client, surface)
        outcome = await session.submit("my name is Anna, what serum?")
    """

    def __init__(
        self,
        client: CompletionClient,
        surface: ChatSurface,
        directive: str | None = None,
        extractor: ProfileExtractor | None = None,
    ) -> None:
        self._client = client
        self._surface = surface
        self._extractor = extractor or ProfileExtractor()
        self._transcript = TranscriptStore(directive if directive is not None else get_directive())
        self._profile = UserProfile()
        self._state = SessionState.IDLE

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def transcript(self) -> TranscriptStore:
        return self._transcript

    @property
    def profile(self) -> UserProfile:
        """Profile snapshot; mutating the copy does not affect the session."""
        return self._profile.model_copy()

    async def submit(self, raw_text: str) -> CycleOutcome:
        """Run one cycle for submitted text.

        Input is re-enabled and the state returns to IDLE on every exit
        path. Unexpected exceptions propagate after that cleanup.

        Args:
            raw_text: Text as typed by the user

        Returns:
            CycleOutcome describing how the cycle ended
        """
        text = raw_text.strip()
        if not text:
            return CycleOutcome.REJECTED
        if self._state is SessionState.SUBMITTING:
            logger.debug("Submission ignored: a request is already in flight")
            return CycleOutcome.REJECTED

        self._state = SessionState.SUBMITTING
        self._surface.set_input_enabled(False)
        try:
            outcome = await self._run_cycle(text)
        finally:
            self._surface.clear_pending()
            self._state = SessionState.IDLE
            self._surface.set_input_enabled(True)

        logger.debug("Cycle finished: %s (transcript length %d)", outcome.value, len(self._transcript))
        return outcome

    async def _run_cycle(self, text: str) -> CycleOutcome:
        fact = self._extractor.update(self._profile, text)
        if fact is not None:
            logger.info("Detected user name via '%s' pattern", fact.pattern)
            self._append_and_render(Role.ASSISTANT, format_acknowledgment(fact.value))

        self._surface.show_latest_question(text)
        self._append_and_render(Role.USER, text)
        self._surface.show_pending()

        request = compose(self._transcript.directive(), self._profile, self._transcript.turns())

        try:
            answer = await self._client.send(request)
        except EndpointError as e:
            logger.warning("Worker returned %s", e.status_code)
            self._surface.clear_pending()
            self._surface.render_turn(Role.ASSISTANT.value, f"Error from worker: {e.status_code} {e.body}")
            return CycleOutcome.ENDPOINT_ERROR
        except TransportError as e:
            logger.warning("Worker unreachable: %s", e.message)
            self._surface.clear_pending()
            self._surface.render_turn(Role.ASSISTANT.value, f"Network error: {e.message}")
            return CycleOutcome.TRANSPORT_ERROR

        self._surface.clear_pending()
        self._append_and_render(Role.ASSISTANT, answer)
        return CycleOutcome.COMPLETED

    def _append_and_render(self, role: Role, text: str) -> None:
        self._transcript.append(role, text)
        self._surface.render_turn(role.value, text)
