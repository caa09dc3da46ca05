"""Remote evaluation channel over awesome's awful.remote D-Bus interface.

The channel knows nothing about screens, tags or clients. It wraps an
expression in the endpoint template, sends it through ``Eval`` and hands back
the reply text. Every failure leaves this module as a ``TransportError``.
"""

import asyncio
import logging
from typing import Any, Optional

from .config import DEFAULT_ENDPOINT, RemoteEndpoint
from .errors import ErrorCode, RemoteEvaluationError, TransportError

logger = logging.getLogger(__name__)

# Import pydbus lazily to handle missing dependency gracefully
try:
    from pydbus import SessionBus
    PYDBUS_AVAILABLE = True
except ImportError:
    PYDBUS_AVAILABLE = False
    logger.debug("pydbus not available - session bus connections will fail")

# awful.remote reports a failed pcall as an unmarked string with this prefix;
# load() failures come back unmarked and unprefixed
REMOTE_ERROR_PREFIX = "Error during execution: "


class EvaluationChannel:
    """Single request/response primitive: send an expression, receive text."""

    def __init__(self, remote: Any, endpoint: RemoteEndpoint = DEFAULT_ENDPOINT) -> None:
        """Initialize channel.

        Args:
            remote: Proxy exposing the ``Eval`` method of the remote interface
            endpoint: Endpoint configuration supplying template and timeout
        """
        self.remote = remote
        self.endpoint = endpoint

    def _call(self, query: str) -> Any:
        if self.endpoint.timeout is not None:
            return self.remote.Eval(query, timeout=self.endpoint.timeout)
        return self.remote.Eval(query)

    async def evaluate(self, expression: str) -> str:
        """Evaluate an expression remotely and return its string rendering.

        Args:
            expression: Lua expression produced by the expression synthesizer

        Returns:
            Reply text with the success marker removed

        Raises:
            RemoteEvaluationError: If the remote runtime failed executing it
            TransportError: If the call could not complete
        """
        query = self.endpoint.wrap(expression)
        logger.debug(f"Evaluating: {query}")

        try:
            reply = await asyncio.to_thread(self._call, query)
        except Exception as e:
            logger.warning(f"Eval call failed for {expression!r}: {e}")
            raise TransportError(str(e), expression=expression) from e

        if not isinstance(reply, str):
            raise TransportError(
                f"expected a string reply, got {type(reply).__name__}",
                code=ErrorCode.UNEXPECTED_REPLY,
                expression=expression,
            )

        marker = self.endpoint.reply_marker
        if not reply.startswith(marker):
            remote_message = reply.removeprefix(REMOTE_ERROR_PREFIX)
            logger.warning(f"Remote evaluation of {expression!r} failed: {remote_message}")
            raise RemoteEvaluationError(expression, remote_message)

        logger.debug(f"Reply: {reply!r}")
        return reply[len(marker):]


async def open_channel(
    endpoint: RemoteEndpoint = DEFAULT_ENDPOINT,
    bus: Optional[Any] = None,
) -> EvaluationChannel:
    """Look up the remote interface on the session bus.

    Args:
        endpoint: Endpoint to connect to
        bus: Bus object with a pydbus-style ``get`` (defaults to a new SessionBus)

    Returns:
        EvaluationChannel bound to the endpoint

    Raises:
        TransportError: If the bus or endpoint cannot be reached
    """
    if bus is None and not PYDBUS_AVAILABLE:
        raise TransportError(
            "pydbus is not installed",
            code=ErrorCode.BUS_UNAVAILABLE,
            suggestion="Install pydbus and PyGObject",
        )

    def lookup() -> Any:
        session = bus if bus is not None else SessionBus()
        return session.get(endpoint.service, endpoint.object_path)[endpoint.interface]

    try:
        remote = await asyncio.to_thread(lookup)
    except Exception as e:
        logger.error(f"Failed to reach {endpoint.service}{endpoint.object_path}: {e}")
        raise TransportError(str(e), code=ErrorCode.ENDPOINT_UNREACHABLE) from e

    logger.info(f"Connected to {endpoint.interface} at {endpoint.service}{endpoint.object_path}")
    return EvaluationChannel(remote, endpoint)
