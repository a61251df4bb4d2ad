"""Failures of a completion round trip.

Every failure the caller has to handle derives from CallError, so the
session can render it without knowing which transport produced it.
"""


class CallError(Exception):
    """A completion call did not produce assistant text."""


class TransportError(CallError):
    """The call never reached a response (DNS, connection, timeout...)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EndpointError(CallError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"{status_code} {body}".rstrip())
        self.status_code = status_code
        self.body = body
