"""Connection Upgrader: negotiate the switch from HTTP to WebSocket.

The upgrader decides whether one inbound request may become a Connection:

1. Origin policy (configurable predicate, default accepts everything)
2. Admission into the listener's connection registry (optional cap)
3. ``accept()``, which writes the 101 Switching Protocols response

Any refusal raises ``HandshakeError``. Refusals before step 3 close the
socket without accepting it, which the listener answers with a plain
HTTP 403, so the client never sees a half-open channel. Nothing is retried.
"""

from __future__ import annotations

import contextlib
import functools
import logging

from fastapi import WebSocket
from starlette.requests import HTTPConnection

from ...config.websocket import WS_CLOSE_BUSY_CODE, WS_CLOSE_POLICY_CODE
from ...errors import HandshakeError
from ..connections import ConnectionRegistry
from .connection import Connection, format_remote
from .origins import OriginPolicy, allow_all_origins

logger = logging.getLogger(__name__)


def _header_has_token(conn: HTTPConnection, name: str, token: str) -> bool:
    value = conn.headers.get(name, "")
    return any(part.strip().lower() == token for part in value.split(","))


class ConnectionUpgrader:
    """Turns inbound upgrade requests into open Connections."""

    def __init__(
        self,
        origin_policy: OriginPolicy = allow_all_origins,
        registry: ConnectionRegistry | None = None,
    ) -> None:
        self._origin_policy = origin_policy
        self._registry = registry

    @property
    def registry(self) -> ConnectionRegistry | None:
        return self._registry

    async def upgrade(self, websocket: WebSocket) -> Connection:
        """Accept ``websocket`` and return an OPEN Connection.

        Raises:
            HandshakeError: origin rejected, server at capacity, or the
                accept could not be completed.
        """
        remote = format_remote(websocket)

        try:
            allowed = bool(self._origin_policy(websocket))
        except Exception as exc:
            await self._refuse(websocket, WS_CLOSE_POLICY_CODE)
            raise HandshakeError("origin_rejected", f"origin policy failed: {exc}", cause=exc) from exc
        if not allowed:
            await self._refuse(websocket, WS_CLOSE_POLICY_CODE)
            origin = websocket.headers.get("origin")
            raise HandshakeError("origin_rejected", f"websocket: request origin not allowed: {origin}")

        registry = self._registry
        if registry is not None and not await registry.admit(websocket):
            await self._refuse(websocket, WS_CLOSE_BUSY_CODE)
            raise HandshakeError(
                "server_at_capacity",
                f"server at capacity ({registry.count()}/{registry.max_connections})",
            )

        try:
            await websocket.accept()
        except Exception as exc:
            if registry is not None:
                await registry.release(websocket)
            raise HandshakeError("accept_failed", f"upgrade failed: {exc}", cause=exc) from exc

        on_release = functools.partial(registry.release, websocket) if registry is not None else None
        logger.debug("upgrade accepted remote=%s", remote)
        return Connection(websocket, remote=remote, on_release=on_release)

    def reject_plain_request(self, request: HTTPConnection) -> HandshakeError:
        """Describe why a plain HTTP request to the upgrade path cannot switch protocols."""
        if not _header_has_token(request, "connection", "upgrade"):
            detail = "'upgrade' token not found in 'Connection' header"
        elif not _header_has_token(request, "upgrade", "websocket"):
            detail = "'websocket' token not found in 'Upgrade' header"
        else:
            detail = "upgrade request could not be negotiated"
        return HandshakeError(
            "not_websocket",
            f"websocket: the client is not using the websocket protocol: {detail}",
        )

    async def _refuse(self, websocket: WebSocket, code: int) -> None:
        """Close an un-accepted socket so the listener sends a rejection."""
        with contextlib.suppress(Exception):
            await websocket.close(code=code)


__all__ = ["ConnectionUpgrader"]
