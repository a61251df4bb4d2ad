from abc import ABC, abstractmethod
from typing import Any

from ..conversation.models import OutgoingRequest


class CompletionClient(ABC):
    """Abstract base class for completion clients.

    This module hides the design decision of how a composed request reaches
    the model. Implementations must handle:
    - Connection setup and teardown
    - Request serialization
    - Mapping wire failures onto CallError kinds
    - Extracting displayable text from the response

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            text = await client.send(request)
        # Automatically cleaned up
    """

    @abstractmethod
    async def send(self, request: OutgoingRequest) -> str:
        """Perform one round trip for ``request``.

        Exactly one attempt is made; there is no retry.

        Args:
            request: Composed request for the current turn

        Returns:
            Assistant text to display, never empty for a success response

        Raises:
            TransportError: If the call could not complete
            EndpointError: If the endpoint returned a non-success status
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Address requests are sent to."""

    async def __aenter__(self) -> "CompletionClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
