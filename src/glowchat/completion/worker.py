import json
import logging
from typing import Any

import httpx

from ..conversation.models import OutgoingRequest
from .base import CompletionClient
from .errors import EndpointError, TransportError

logger = logging.getLogger(__name__)


def _compact_json(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _first_choice_content(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    return message.get("content")


def extract_completion_text(body: str, status_code: int = 200) -> str:
    """Pick displayable text out of a success response body.

    Fallback order:
    1. ``choices[0].message.content`` when it is a non-empty string
    2. a non-empty ``error`` field (non-strings are JSON-encoded)
    3. the whole body re-serialized as compact JSON

    A body that is not JSON at all is returned as-is. An empty or
    whitespace-only body becomes a short notice naming the status.

    Args:
        body: Response body text
        status_code: HTTP status of the response, used in the empty-body notice

    Returns:
        Text to show as the assistant's answer, never empty
    """
    if not body.strip():
        logger.warning("Completion response body is empty (status %d)", status_code)
        return f"Empty response from worker ({status_code})"

    try:
        data = json.loads(body)
    except ValueError:
        logger.warning("Completion response is not JSON; showing raw body")
        return body

    content = _first_choice_content(data)
    if isinstance(content, str) and content:
        return content

    logger.warning("Completion response has no choices[0].message.content")
    error = data.get("error") if isinstance(data, dict) else None
    if error:
        return error if isinstance(error, str) else _compact_json(error)
    return _compact_json(data)


class WorkerCompletionClient(CompletionClient):
    """Client for a worker that forwards requests to a chat completions API.

    The worker holds the API key; this client only ever POSTs
    ``{"messages": [...]}`` to it.

    Hidden design decisions:
    - HTTP client setup (httpx connection pool)
    - Request serialization
    - Failure classification
    - Response fallback chain
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize the worker client.

        Args:
            url: Worker endpoint URL
            timeout: Transport timeout in seconds (None keeps the httpx default)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._url = url
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            **client_kwargs
        )

    @property
    def endpoint(self) -> str:
        return self._url

    async def send(self, request: OutgoingRequest) -> str:
        """POST the request to the worker and return the assistant text.

        Args:
            request: Composed request for the current turn

        Returns:
            Assistant text (see extract_completion_text for the fallbacks)

        Raises:
            TransportError: If no response was received
            EndpointError: If the worker answered with a non-2xx status
        """
        payload = request.to_payload()
        logger.debug("POST %s with %d messages", self._url, len(payload["messages"]))

        try:
            response = await self._client.post(self._url, json=payload)
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise EndpointError(response.status_code, response.text)

        return extract_completion_text(response.text, response.status_code)

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
