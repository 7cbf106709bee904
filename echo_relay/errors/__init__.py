"""Centralized exception classes for the echo server.

Organization:
    - handshake.py: upgrade negotiation failures (request boundary)
    - session.py: receive/write failures (session boundary)
    - startup.py: listener bind failures (process-fatal)
    - classify.py: exception-to-label mapping for log records
"""

from .classify import classify_error
from .handshake import HandshakeError
from .session import ExpectedClosure, SessionError, UnexpectedReceiveError, WriteError
from .startup import FatalStartupError

__all__ = [
    # Handshake
    "HandshakeError",
    # Session
    "SessionError",
    "ExpectedClosure",
    "UnexpectedReceiveError",
    "WriteError",
    # Startup
    "FatalStartupError",
    # Classification
    "classify_error",
]
