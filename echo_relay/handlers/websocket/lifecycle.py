"""Optional per-connection idle watchdog.

The echo loop itself enforces no timeouts: a peer that never sends and never
closes keeps its session alive. Deployments that want idle connections
reclaimed can enable this watchdog with ``WS_IDLE_TIMEOUT_S > 0``. Each
session then owns a WebSocketLifecycle that:

1. Tracks the last activity timestamp (updated via touch())
2. Runs a background task that periodically checks for idleness
3. Closes the connection with WS_CLOSE_IDLE_CODE once the timeout elapses

Usage:
    lifecycle = WebSocketLifecycle(connection, idle_timeout_s=60)
    lifecycle.start()

    # In the receive loop:
    lifecycle.touch()

    # On cleanup:
    await lifecycle.stop()
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from typing import Protocol

from ...config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
)

logger = logging.getLogger(__name__)


class Closable(Protocol):
    async def close(self, *, code: int, reason: str) -> object: ...


class WebSocketLifecycle:
    """Tracks activity timestamps and enforces an idle timeout."""

    def __init__(
        self,
        target: Closable,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
        idle_close_code: int | None = None,
    ):
        """Initialize the watchdog for one connection.

        Args:
            target: Object closed when the idle timeout fires (normally the
                Connection, so the close goes through its release path).
            idle_timeout_s: Override for idle timeout (defaults to config).
            watchdog_tick_s: Override for check interval (defaults to config).
            idle_close_code: WebSocket close code for idle disconnect.
        """
        self._target = target
        self._idle_timeout_s = float(idle_timeout_s or WS_IDLE_TIMEOUT_S)
        self._watchdog_tick_s = float(watchdog_tick_s or WS_WATCHDOG_TICK_S)
        self._idle_close_code = (
            idle_close_code if idle_close_code is not None else WS_CLOSE_IDLE_CODE
        )
        self._idle_close_reason = WS_CLOSE_IDLE_REASON
        self._last_activity = time.monotonic()
        self._stop_event = asyncio.Event()
        self._idle_fired = False
        self._task: asyncio.Task | None = None

    def touch(self) -> None:
        """Record recent activity (resets idle countdown)."""

        self._last_activity = time.monotonic()

    def idle_timed_out(self) -> bool:
        """Return True once the watchdog has closed the connection."""

        return self._idle_fired

    def start(self) -> asyncio.Task:
        """Start the watchdog task (idempotent)."""

        if self._task is None:
            self._task = asyncio.create_task(self._watchdog_loop())
        return self._task

    async def stop(self) -> None:
        """Stop the watchdog task and wait for it to finish."""

        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _watchdog_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._watchdog_tick_s)
                if self._stop_event.is_set():
                    break
                if (time.monotonic() - self._last_activity) >= self._idle_timeout_s:
                    logger.info("WebSocket idle timeout reached; closing connection")
                    self._idle_fired = True
                    self._stop_event.set()
                    await self._close_target()
                    break
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.debug("Idle watchdog exiting due to unexpected error", exc_info=True)

    async def _close_target(self) -> None:
        with contextlib.suppress(Exception):
            await self._target.close(code=self._idle_close_code, reason=self._idle_close_reason)


__all__ = ["WebSocketLifecycle"]
