"""Unit tests for the optional idle watchdog."""

from __future__ import annotations

import asyncio

from echo_relay.config.websocket import WS_CLOSE_IDLE_REASON
from echo_relay.handlers.websocket.connection import Connection, ConnectionState
from echo_relay.handlers.websocket.lifecycle import WebSocketLifecycle
from tests.helpers.fakes import FakeWebSocket, ReleaseCounter


class _FakeTarget:
    def __init__(self) -> None:
        self.close_calls: list[tuple[int, str]] = []

    async def close(self, *, code: int, reason: str) -> None:
        self.close_calls.append((code, reason))


def test_lifecycle_sets_idle_timeout_flag_and_closes_target() -> None:
    async def _run() -> None:
        target = _FakeTarget()
        lifecycle = WebSocketLifecycle(
            target,
            idle_timeout_s=0.02,
            watchdog_tick_s=0.005,
            idle_close_code=4444,
        )
        lifecycle.start()
        await asyncio.sleep(0.06)
        await lifecycle.stop()

        assert lifecycle.idle_timed_out()
        assert target.close_calls == [(4444, WS_CLOSE_IDLE_REASON)]

    asyncio.run(_run())


def test_lifecycle_stop_before_timeout_does_not_mark_idle_timeout() -> None:
    async def _run() -> None:
        target = _FakeTarget()
        lifecycle = WebSocketLifecycle(
            target,
            idle_timeout_s=1.0,
            watchdog_tick_s=0.05,
        )
        lifecycle.start()
        await asyncio.sleep(0.01)
        await lifecycle.stop()

        assert not lifecycle.idle_timed_out()
        assert target.close_calls == []

    asyncio.run(_run())


def test_touch_keeps_connection_alive() -> None:
    async def _run() -> None:
        target = _FakeTarget()
        lifecycle = WebSocketLifecycle(target, idle_timeout_s=0.1, watchdog_tick_s=0.01)
        lifecycle.start()
        for _ in range(10):
            await asyncio.sleep(0.02)
            lifecycle.touch()
        await lifecycle.stop()

        assert not lifecycle.idle_timed_out()
        assert target.close_calls == []

    asyncio.run(_run())


def test_idle_timeout_closes_connection_through_release_path() -> None:
    async def _run() -> None:
        ws = FakeWebSocket()
        await ws.accept()
        release = ReleaseCounter()
        connection = Connection(ws, on_release=release)
        lifecycle = WebSocketLifecycle(connection, idle_timeout_s=0.02, watchdog_tick_s=0.005)
        lifecycle.start()
        await asyncio.sleep(0.06)
        await lifecycle.stop()

        assert connection.state is ConnectionState.CLOSED
        assert ws.close_calls == [(4000, WS_CLOSE_IDLE_REASON)]
        assert release.calls == 1

    asyncio.run(_run())
