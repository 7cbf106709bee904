"""WebSocket-specific runtime configuration values.

This module defines constants for WebSocket connection lifecycle management:

Origin Policy:
    WS_ALLOWED_ORIGINS: "*" accepts every origin (local testing only),
        "same-origin" requires the Origin host to match the Host header,
        anything else is a comma-separated allow list.

Timeouts:
    WS_IDLE_TIMEOUT_S: Close connections after this many seconds of
        inactivity. 0 disables the watchdog, which is the default: the echo
        loop itself never times out a peer.

    WS_WATCHDOG_TICK_S: How often the idle watchdog checks activity.

Transport:
    WS_MAX_MESSAGE_BYTES: Largest message the listener will accept.
    WS_PING_INTERVAL_S / WS_PING_TIMEOUT_S: Protocol-level ping frames sent
        by the listener. The echo loop never sends application pings.

Close Codes (RFC 6455):
    1000: Normal closure
    1001: Going away (browser tab closed, server restart)
    1005: No status received
    1006: Abnormal closure (transport dropped without a close frame)
    1008: Policy violation (origin rejected)
    1013: Try again later (server at capacity)
    4000+: Application-defined (idle timeout)
"""

from __future__ import annotations

import os

# ============================================================================
# Origin Policy
# ============================================================================

WS_ALLOWED_ORIGINS = os.getenv("WS_ALLOWED_ORIGINS", "*")

# ============================================================================
# Timeout Configuration
# ============================================================================

WS_IDLE_TIMEOUT_S = float(os.getenv("WS_IDLE_TIMEOUT_S", "0"))
WS_WATCHDOG_TICK_S = float(os.getenv("WS_WATCHDOG_TICK_S", "5"))  # Check every 5s

# ============================================================================
# Transport
# ============================================================================

WS_MAX_MESSAGE_BYTES = int(os.getenv("WS_MAX_MESSAGE_BYTES", str(16 * 1024 * 1024)))
WS_PING_INTERVAL_S = float(os.getenv("WS_PING_INTERVAL_S", "20"))
WS_PING_TIMEOUT_S = float(os.getenv("WS_PING_TIMEOUT_S", "20"))

# ============================================================================
# WebSocket Close Codes
# ============================================================================

WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_GOING_AWAY_CODE = 1001
WS_CLOSE_NO_STATUS_CODE = 1005
WS_CLOSE_ABNORMAL_CODE = 1006
WS_CLOSE_POLICY_CODE = int(os.getenv("WS_CLOSE_POLICY_CODE", "1008"))  # Policy violation
WS_CLOSE_BUSY_CODE = int(os.getenv("WS_CLOSE_BUSY_CODE", "1013"))  # Try again later
WS_CLOSE_IDLE_CODE = int(os.getenv("WS_CLOSE_IDLE_CODE", "4000"))  # Application-defined
WS_CLOSE_IDLE_REASON = os.getenv("WS_CLOSE_IDLE_REASON", "idle_timeout")

# Peer close codes that end a session without an error record
WS_EXPECTED_CLOSE_CODES = frozenset(
    {
        WS_CLOSE_NORMAL_CODE,
        WS_CLOSE_GOING_AWAY_CODE,
        WS_CLOSE_NO_STATUS_CODE,
        WS_CLOSE_ABNORMAL_CODE,
    }
)

__all__ = [
    "WS_ALLOWED_ORIGINS",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_MESSAGE_BYTES",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_GOING_AWAY_CODE",
    "WS_CLOSE_NO_STATUS_CODE",
    "WS_CLOSE_ABNORMAL_CODE",
    "WS_CLOSE_POLICY_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_EXPECTED_CLOSE_CODES",
]
