"""Per-connection failures raised by the echo loop.

All of these are contained by the session that owns the connection. They
never propagate into the listener or into sibling sessions.
"""

from __future__ import annotations


class SessionError(Exception):
    """Base class for failures that end an echo session."""


class ExpectedClosure(SessionError):
    """Peer closed the connection with a recognized close signal.

    ``code`` is the WebSocket close code when one was observed, otherwise
    ``None`` (transport reset without a close frame).
    """

    def __init__(self, code: int | None = None, reason: str | None = None) -> None:
        super().__init__(f"connection closed (code={code})")
        self.code = code
        self.reason = reason or ""


class UnexpectedReceiveError(SessionError):
    """Receiving failed for a reason other than an expected closure."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class WriteError(SessionError):
    """Echoing a message back to the peer failed."""


__all__ = [
    "SessionError",
    "ExpectedClosure",
    "UnexpectedReceiveError",
    "WriteError",
]
