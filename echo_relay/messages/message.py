"""Message value type carried over an upgraded connection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MessageKind(str, Enum):
    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class Message:
    """One WebSocket data message: a discriminator plus its raw payload.

    TEXT payloads hold the UTF-8 encoding of the received string so both
    kinds share a byte representation.
    """

    kind: MessageKind
    data: bytes

    @classmethod
    def text(cls, value: str) -> Message:
        return cls(MessageKind.TEXT, value.encode("utf-8"))

    @classmethod
    def binary(cls, value: bytes) -> Message:
        return cls(MessageKind.BINARY, bytes(value))

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> Message:
        """Build a message from an ASGI ``websocket.receive`` event.

        The event carries exactly one of ``text`` or ``bytes``; an empty
        text frame arrives as ``text=""`` and must stay TEXT.
        """
        text = event.get("text")
        if text is not None:
            return cls.text(text)
        data = event.get("bytes")
        if data is not None:
            return cls.binary(data)
        raise ValueError("websocket.receive event carries neither text nor bytes")

    @property
    def size(self) -> int:
        return len(self.data)

    def as_text(self) -> str:
        return self.data.decode("utf-8")

    def describe(self) -> str:
        """Log form: full content for text, byte count for binary."""
        if self.kind is MessageKind.TEXT:
            return self.as_text()
        return f"{self.size} bytes"


__all__ = ["Message", "MessageKind"]
