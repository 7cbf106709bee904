"""Message types exchanged with peers."""

from .message import Message, MessageKind

__all__ = ["Message", "MessageKind"]
