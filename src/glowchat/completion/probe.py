"""Connectivity check against the completion endpoint.

The probe is observational only: it logs what happened and never touches
session state. Failures are contained here.
"""

import asyncio
import logging

from ..conversation.models import Message, OutgoingRequest, Role
from .base import CompletionClient
from .errors import EndpointError, TransportError

logger = logging.getLogger(__name__)

HEALTH_CHECK_REQUEST = OutgoingRequest(
    messages=(Message(role=Role.SYSTEM, content="health-check"),)
)

# Strong references to running probes; the event loop only keeps weak ones.
_background_probes: set[asyncio.Task[bool]] = set()


async def verify_endpoint(client: CompletionClient) -> bool:
    """Send a health-check request and log the outcome.

    Returns:
        True if the endpoint answered with a success status
    """
    try:
        reply = await client.send(HEALTH_CHECK_REQUEST)
    except EndpointError as e:
        logger.error("Worker health-check failed: %s %s", e.status_code, e.body)
        return False
    except TransportError as e:
        logger.error("Worker health-check error: %s", e.message)
        return False
    except Exception:
        logger.exception("Worker health-check raised unexpectedly")
        return False

    logger.info("Worker reachable at %s, health-check response: %s", client.endpoint, reply)
    return True


def start_probe(client: CompletionClient) -> asyncio.Task[bool]:
    """Launch verify_endpoint as a detached task.

    Must be called from a running event loop. Nothing waits on the task.
    """
    task = asyncio.get_running_loop().create_task(
        verify_endpoint(client), name="glowchat-endpoint-probe"
    )
    _background_probes.add(task)
    task.add_done_callback(_background_probes.discard)
    return task
