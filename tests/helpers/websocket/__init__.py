"""WebSocket utilities for test clients."""

from .ws import connect_with_retries, normalize_ws_url, recv_raw

__all__ = [
    "connect_with_retries",
    "normalize_ws_url",
    "recv_raw",
]
