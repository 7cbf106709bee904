"""Upgraded WebSocket channel owned by exactly one echo session.

``Connection`` wraps the Starlette WebSocket handle with message-level
receive/send calls that raise the session error taxonomy, and an idempotent
``close()`` that is bound to the owner's lifetime through ``async with``:

    async with connection:
        message = await connection.receive_message()
        await connection.send_message(message)

Leaving the block releases the transport and the listener's admission slot
exactly once, whichever way the block exits.
"""

from __future__ import annotations

import contextlib
import logging
import uuid
from collections.abc import Awaitable, Callable
from enum import Enum

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from ...config.websocket import WS_CLOSE_NORMAL_CODE, WS_CLOSE_NO_STATUS_CODE
from ...errors import ExpectedClosure, UnexpectedReceiveError, WriteError
from ...messages import Message, MessageKind
from .disconnects import close_code_of, is_expected_close_code, is_expected_disconnect

logger = logging.getLogger(__name__)

ReleaseFn = Callable[[], Awaitable[object]]


class ConnectionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


def format_remote(websocket: WebSocket) -> str:
    """Render the peer address as ``host:port`` for log records."""
    client = websocket.client
    if client is None:
        return "unknown"
    host, port = client
    return f"{host}:{port}"


class Connection:
    """One accepted WebSocket connection.

    Attributes:
        remote: Peer endpoint identifier used in log records.
        connection_id: Short random id correlating records of one connection.
    """

    def __init__(
        self,
        websocket: WebSocket,
        *,
        remote: str | None = None,
        connection_id: str | None = None,
        on_release: ReleaseFn | None = None,
    ) -> None:
        self._ws = websocket
        self.remote = remote or format_remote(websocket)
        self.connection_id = connection_id or uuid.uuid4().hex[:8]
        self._on_release = on_release
        self._state = ConnectionState.OPEN

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is ConnectionState.OPEN

    @property
    def websocket(self) -> WebSocket:
        return self._ws

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def receive_message(self) -> Message:
        """Block until the next data message arrives.

        Raises:
            ExpectedClosure: the peer closed with a recognized code, the
                transport was torn down, or this side already closed.
            UnexpectedReceiveError: any other receive failure.
        """
        try:
            event = await self._ws.receive()
        except Exception as exc:
            if not self.is_open or is_expected_disconnect(exc):
                raise ExpectedClosure(close_code_of(exc)) from exc
            raise UnexpectedReceiveError(str(exc) or type(exc).__name__, code=close_code_of(exc)) from exc

        if event["type"] == "websocket.disconnect":
            code = event.get("code", WS_CLOSE_NO_STATUS_CODE)
            reason = event.get("reason")
            if not self.is_open or is_expected_close_code(code):
                raise ExpectedClosure(code, reason)
            raise UnexpectedReceiveError(
                f"websocket: close {code} {reason or ''}".rstrip(),
                code=code,
            )

        try:
            return Message.from_event(event)
        except ValueError as exc:
            raise UnexpectedReceiveError(str(exc)) from exc

    async def send_message(self, message: Message) -> None:
        """Write ``message`` with its own discriminator and payload.

        Raises:
            WriteError: the connection is closed or the transport refused
                the frame.
        """
        if not self.is_open:
            raise WriteError("websocket: write on closed connection")
        try:
            if message.kind is MessageKind.TEXT:
                await self._ws.send_text(message.as_text())
            else:
                await self._ws.send_bytes(message.data)
        except Exception as exc:
            raise WriteError(str(exc) or type(exc).__name__) from exc

    async def close(self, code: int = WS_CLOSE_NORMAL_CODE, reason: str | None = None) -> bool:
        """Close the connection; return False if it was already closed."""
        if self._state is ConnectionState.CLOSED:
            return False
        self._state = ConnectionState.CLOSED
        try:
            if self._transport_connected():
                with contextlib.suppress(Exception):
                    await self._ws.close(code=code, reason=reason)
        finally:
            if self._on_release is not None:
                await self._on_release()
        logger.debug("connection released code=%s", code)
        return True

    def _transport_connected(self) -> bool:
        return (
            self._ws.application_state == WebSocketState.CONNECTED
            and self._ws.client_state == WebSocketState.CONNECTED
        )


__all__ = ["Connection", "ConnectionState", "format_remote"]
