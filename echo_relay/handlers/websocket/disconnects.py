"""Helpers for classifying expected WebSocket disconnect exceptions."""

from __future__ import annotations

from anyio import BrokenResourceError, ClosedResourceError, EndOfStream
from fastapi import WebSocketDisconnect
from websockets.exceptions import ConnectionClosed

from ...config.websocket import WS_CLOSE_ABNORMAL_CODE, WS_EXPECTED_CLOSE_CODES

_RUNTIME_DISCONNECT_ERRORS = (
    ConnectionResetError,
    BrokenPipeError,
    EOFError,
    BrokenResourceError,
    ClosedResourceError,
    EndOfStream,
)

_RUNTIME_DISCONNECT_MESSAGES = (
    "websocket is not connected",
    "cannot call receive once a disconnect message has been received",
    'cannot call "receive" once a disconnect message has been received',
)


def close_code_of(exc: BaseException) -> int | None:
    """Return the close code carried by a disconnect exception, if any."""

    if isinstance(exc, WebSocketDisconnect):
        return exc.code
    if isinstance(exc, ConnectionClosed):
        # No close frame received means the transport dropped
        return exc.rcvd.code if exc.rcvd is not None else WS_CLOSE_ABNORMAL_CODE
    return None


def is_expected_close_code(code: int | None) -> bool:
    return code is None or code in WS_EXPECTED_CLOSE_CODES


def is_expected_disconnect(exc: BaseException) -> bool:
    """Return True when the exception represents normal transport teardown."""

    if isinstance(exc, (WebSocketDisconnect, ConnectionClosed)):
        return is_expected_close_code(close_code_of(exc))
    if isinstance(exc, _RUNTIME_DISCONNECT_ERRORS):
        return True
    if isinstance(exc, RuntimeError):
        message = str(exc).strip().lower()
        return any(fragment in message for fragment in _RUNTIME_DISCONNECT_MESSAGES)
    return False


__all__ = ["close_code_of", "is_expected_close_code", "is_expected_disconnect"]
