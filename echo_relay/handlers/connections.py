"""Listener-level registry of admitted WebSocket connections.

The registry counts live connections for health reporting and, when a cap
is configured, refuses admission once the cap is reached. It is owned by the
app built in ``server.create_app`` and handed to the upgrader; sessions only
ever touch it through their connection's release callback.

Example:
    registry = ConnectionRegistry(max_connections=100)

    if not await registry.admit(ws):
        ...  # refuse the upgrade
    try:
        ...  # run the session
    finally:
        await registry.release(ws)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Tracks admitted connections and enforces an optional cap.

    Attributes:
        max_connections: Maximum concurrent connections, 0 for unlimited.
        active_connections: Handles of the currently admitted connections.
    """

    def __init__(self, max_connections: int = 0) -> None:
        self.max_connections = max(0, int(max_connections))
        self.active_connections: set[Any] = set()
        self._lock = asyncio.Lock()  # Protects active_connections

    @property
    def limited(self) -> bool:
        return self.max_connections > 0

    async def admit(self, handle: Any) -> bool:
        """Register a connection; return False when at capacity."""
        async with self._lock:
            if self.limited and len(self.active_connections) >= self.max_connections:
                logger.warning(
                    "Connection rejected: at capacity (%s/%s)",
                    len(self.active_connections),
                    self.max_connections,
                )
                return False
            self.active_connections.add(handle)
            logger.debug("Connection admitted: %s active", len(self.active_connections))
            return True

    async def release(self, handle: Any) -> bool:
        """Forget a connection; return False if it was not registered."""
        async with self._lock:
            if handle not in self.active_connections:
                return False
            self.active_connections.remove(handle)
            logger.debug("Connection removed: %s active", len(self.active_connections))
            return True

    def count(self) -> int:
        return len(self.active_connections)

    def capacity_info(self) -> dict[str, Any]:
        """Get capacity information for health reporting."""
        active = len(self.active_connections)
        return {
            "active": active,
            "max": self.max_connections if self.limited else None,
            "at_capacity": self.limited and active >= self.max_connections,
        }


__all__ = ["ConnectionRegistry"]
