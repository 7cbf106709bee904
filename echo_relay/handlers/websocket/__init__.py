"""WebSocket handler exports."""

from .connection import Connection, ConnectionState
from .lifecycle import WebSocketLifecycle
from .manager import handle_websocket_connection
from .origins import allow_all_origins, allow_origins, build_origin_policy, same_origin
from .session import EchoSession, SessionState
from .upgrader import ConnectionUpgrader

__all__ = [
    "Connection",
    "ConnectionState",
    "ConnectionUpgrader",
    "EchoSession",
    "SessionState",
    "WebSocketLifecycle",
    "allow_all_origins",
    "allow_origins",
    "build_origin_policy",
    "handle_websocket_connection",
    "same_origin",
]
