"""Runtime settings snapshot handed to the app factory.

The individual config modules read the environment once at import. The app
factory takes a ``Settings`` value instead of reaching into those modules so
tests (and embedding callers) can build an app with explicit values.
"""

from __future__ import annotations

from dataclasses import dataclass

from .server import MAX_CONCURRENT_CONNECTIONS, SERVER_HOST, SERVER_PORT, WS_PATH
from .websocket import (
    WS_ALLOWED_ORIGINS,
    WS_IDLE_TIMEOUT_S,
    WS_MAX_MESSAGE_BYTES,
    WS_PING_INTERVAL_S,
    WS_PING_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
)


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = SERVER_HOST
    port: int = SERVER_PORT
    ws_path: str = WS_PATH
    allowed_origins: str = WS_ALLOWED_ORIGINS
    max_connections: int = MAX_CONCURRENT_CONNECTIONS
    idle_timeout_s: float = WS_IDLE_TIMEOUT_S
    watchdog_tick_s: float = WS_WATCHDOG_TICK_S
    max_message_bytes: int = WS_MAX_MESSAGE_BYTES
    ping_interval_s: float = WS_PING_INTERVAL_S
    ping_timeout_s: float = WS_PING_TIMEOUT_S

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the values the config modules read at import."""
        return cls()

    @property
    def idle_timeout_enabled(self) -> bool:
        return self.idle_timeout_s > 0


__all__ = ["Settings"]
