"""Exception classification helpers for log labels."""

from __future__ import annotations

from .handshake import HandshakeError
from .session import ExpectedClosure, UnexpectedReceiveError, WriteError
from .startup import FatalStartupError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (HandshakeError, "handshake"),
    (ExpectedClosure, "closed"),
    (UnexpectedReceiveError, "receive_error"),
    (WriteError, "write_error"),
    (FatalStartupError, "startup"),
)


def classify_error(exc: BaseException | None) -> str:
    """Map an exception to a short category label."""

    if exc is None:
        return "closed"
    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
