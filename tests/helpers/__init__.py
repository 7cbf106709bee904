"""Common utilities for tests and client tools."""

__all__ = [
    "cli",
    "fakes",
    "setup",
    "websocket",
]
