"""Echo Session: the receive/echo loop for one Connection.

State machine::

    OPEN -> RECEIVING -> ECHOING -> RECEIVING -> ... -> CLOSED

Each iteration blocks on the next message, logs it, and writes it straight
back with the same discriminator and payload before receiving again. There
is no pipelining, batching, or coalescing: message N is echoed before
message N+1 is read. CLOSED is reachable from any point in the loop:

- ExpectedClosure (peer close 1000/1001/1005/1006, transport teardown):
  loop exits, nothing logged at error level
- UnexpectedReceiveError: logged as an error, loop exits
- WriteError: logged as an error, loop exits

The connection is released by leaving its ``async with`` block, so release
happens exactly once on every exit path.
"""

from __future__ import annotations

import contextlib
import logging
from enum import Enum

from ...errors import ExpectedClosure, SessionError, UnexpectedReceiveError, WriteError, classify_error
from ...logging import log_context
from .connection import Connection
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    OPEN = "open"
    RECEIVING = "receiving"
    ECHOING = "echoing"
    CLOSED = "closed"


class EchoSession:
    """Owns one Connection from accept to release.

    Attributes:
        state: Current position in the state machine.
        echoed: Number of messages written back so far.
        exit_error: The session error that ended the loop.
    """

    def __init__(self, connection: Connection, lifecycle: WebSocketLifecycle | None = None) -> None:
        self._connection = connection
        self._lifecycle = lifecycle
        self.state = SessionState.OPEN
        self.echoed = 0
        self.exit_error: SessionError | None = None

    @property
    def connection(self) -> Connection:
        return self._connection

    async def run(self) -> None:
        conn = self._connection
        with log_context(client_id=conn.remote, connection_id=conn.connection_id):
            logger.info("Client connected: %s", conn.remote)
            if self._lifecycle is not None:
                self._lifecycle.start()
            try:
                async with conn:
                    await self._echo_loop()
            finally:
                if self._lifecycle is not None:
                    with contextlib.suppress(Exception):
                        await self._lifecycle.stop()
                self.state = SessionState.CLOSED
                logger.info(
                    "Client disconnected: %s echoed=%d reason=%s",
                    conn.remote,
                    self.echoed,
                    classify_error(self.exit_error),
                )

    async def _echo_loop(self) -> None:
        conn = self._connection
        while True:
            self.state = SessionState.RECEIVING
            try:
                message = await conn.receive_message()
            except ExpectedClosure as exc:
                self.exit_error = exc
                logger.debug("peer closed code=%s", exc.code)
                return
            except UnexpectedReceiveError as exc:
                self.exit_error = exc
                logger.error("Error: %s", exc)
                return

            if self._lifecycle is not None:
                self._lifecycle.touch()
            logger.info("Received (%s): %s", message.kind.value, message.describe())

            self.state = SessionState.ECHOING
            try:
                await conn.send_message(message)
            except WriteError as exc:
                self.exit_error = exc
                logger.error("Write error: %s", exc)
                return
            self.echoed += 1


__all__ = ["EchoSession", "SessionState"]
