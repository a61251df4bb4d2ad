from .base import CompletionClient
from .errors import CallError, EndpointError, TransportError
from .probe import start_probe, verify_endpoint
from .worker import WorkerCompletionClient, extract_completion_text

__all__ = [
    "CallError",
    "CompletionClient",
    "EndpointError",
    "TransportError",
    "WorkerCompletionClient",
    "extract_completion_text",
    "start_probe",
    "verify_endpoint",
]
