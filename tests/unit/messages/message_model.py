"""Unit tests for the Message value type."""

from __future__ import annotations

import pytest

from echo_relay.messages import Message, MessageKind


def test_from_event_text() -> None:
    message = Message.from_event({"type": "websocket.receive", "text": "ping"})
    assert message.kind is MessageKind.TEXT
    assert message.data == b"ping"


def test_from_event_empty_text_stays_text() -> None:
    message = Message.from_event({"type": "websocket.receive", "text": ""})
    assert message.kind is MessageKind.TEXT
    assert message.size == 0


def test_from_event_bytes() -> None:
    message = Message.from_event({"type": "websocket.receive", "bytes": b"\x00\xff\x10", "text": None})
    assert message == Message(MessageKind.BINARY, b"\x00\xff\x10")


def test_from_event_without_payload_is_rejected() -> None:
    with pytest.raises(ValueError):
        Message.from_event({"type": "websocket.receive"})


def test_text_round_trips_non_ascii() -> None:
    message = Message.text("héllo ✓")
    assert message.as_text() == "héllo ✓"
    assert message.size == len("héllo ✓".encode("utf-8"))


def test_describe_shows_text_but_only_counts_binary() -> None:
    assert Message.text("hello").describe() == "hello"
    assert Message.binary(b"\x00" * 12).describe() == "12 bytes"
