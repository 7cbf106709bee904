"""Configuration for the client-side test tools."""

from .env import (
    DEFAULT_RECV_TIMEOUT_SEC,
    DEFAULT_SERVER_WS_URL,
    DEFAULT_WS_PATH,
    DEFAULT_WS_PING_INTERVAL,
    DEFAULT_WS_PING_TIMEOUT,
    ECHO_BURST_COUNT,
    ECHO_PARALLEL_CONNECTIONS,
)

__all__ = [
    "DEFAULT_RECV_TIMEOUT_SEC",
    "DEFAULT_SERVER_WS_URL",
    "DEFAULT_WS_PATH",
    "DEFAULT_WS_PING_INTERVAL",
    "DEFAULT_WS_PING_TIMEOUT",
    "ECHO_BURST_COUNT",
    "ECHO_PARALLEL_CONNECTIONS",
]
