"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- server: listener address, upgrade path, admission cap
- websocket: origin policy, idle watchdog, transport limits, close codes
- logging: log level and format
- settings: immutable snapshot passed to the app factory
"""

from .server import MAX_CONCURRENT_CONNECTIONS, SERVER_HOST, SERVER_PORT, WS_PATH
from .settings import Settings
from .websocket import (
    WS_ALLOWED_ORIGINS,
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
    WS_MAX_MESSAGE_BYTES,
    WS_PING_INTERVAL_S,
    WS_PING_TIMEOUT_S,
)

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "SERVER_HOST",
    "SERVER_PORT",
    "WS_PATH",
    "Settings",
    "WS_ALLOWED_ORIGINS",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_MESSAGE_BYTES",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
]
