"""Upgrade-path entry point handed to the router.

One call per inbound upgrade request, each on its own task supplied by the
listener: negotiate the upgrade, then run a fresh EchoSession until the
connection ends. A failed handshake ends the request without a session.
Nothing raised here reaches the listener or other connections.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import WebSocket

from ...errors import HandshakeError
from .connection import Connection, format_remote
from .lifecycle import WebSocketLifecycle
from .session import EchoSession
from .upgrader import ConnectionUpgrader

logger = logging.getLogger(__name__)

LifecycleFactory = Callable[[Connection], WebSocketLifecycle]


async def handle_websocket_connection(
    websocket: WebSocket,
    upgrader: ConnectionUpgrader,
    lifecycle_factory: LifecycleFactory | None = None,
) -> EchoSession | None:
    """Upgrade ``websocket`` and echo on it until it closes.

    Args:
        websocket: The inbound WebSocket scope from FastAPI.
        upgrader: Negotiates the protocol switch.
        lifecycle_factory: Builds an idle watchdog per connection; None
            leaves connections without a timeout.

    Returns:
        The finished session, or None when the handshake was rejected.
    """
    try:
        connection = await upgrader.upgrade(websocket)
    except HandshakeError as exc:
        logger.warning(
            "Upgrade error: %s reason=%s remote=%s",
            exc.message,
            exc.reason,
            format_remote(websocket),
        )
        return None

    lifecycle = lifecycle_factory(connection) if lifecycle_factory is not None else None
    session = EchoSession(connection, lifecycle=lifecycle)
    await session.run()
    return session


__all__ = ["handle_websocket_connection", "LifecycleFactory"]
