"""End-to-end echo behavior through the FastAPI app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from echo_relay.config import Settings
from echo_relay.server import create_app


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(**overrides)))


def test_home_serves_test_page() -> None:
    with _client() as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "WebSocket Echo Server Test" in response.text


def test_healthz_reports_connections() -> None:
    with _client(max_connections=4) as client:
        response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "connections": {"active": 0, "max": 4, "at_capacity": False},
    }


def test_plain_http_on_upgrade_path_is_rejected() -> None:
    with _client() as client:
        response = client.get("/ws")

    assert response.status_code == 400
    assert response.headers["sec-websocket-version"] == "13"
    body = response.json()
    assert body["error"] == "not_websocket"
    assert "not using the websocket protocol" in body["message"]


def test_echoes_concrete_scenario() -> None:
    with _client() as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("ping")
            assert ws.receive_text() == "ping"

            ws.send_bytes(bytes([0x00, 0xFF, 0x10]))
            assert ws.receive_bytes() == bytes([0x00, 0xFF, 0x10])

            ws.send_text("")
            assert ws.receive_text() == ""


def test_echo_preserves_frame_type() -> None:
    with _client() as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_bytes(b"binary")
            message = ws.receive()

    assert message["type"] == "websocket.send"
    assert message.get("bytes") == b"binary"
    assert message.get("text") is None


def test_large_binary_payload_round_trips() -> None:
    payload = bytes(range(256)) * 4096  # 1 MiB
    with _client() as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_bytes(payload)
            assert ws.receive_bytes() == payload


def test_order_is_preserved_without_waiting_between_sends() -> None:
    payloads = [f"message {i}" for i in range(20)]
    with _client() as client:
        with client.websocket_connect("/ws") as ws:
            for payload in payloads:
                ws.send_text(payload)
            received = [ws.receive_text() for _ in payloads]

    assert received == payloads


def test_connections_are_isolated() -> None:
    with _client() as client:
        with client.websocket_connect("/ws") as ws_a, client.websocket_connect("/ws") as ws_b:
            ws_a.send_text("for a")
            ws_b.send_text("for b")
            ws_b.send_bytes(b"\x01")
            ws_a.send_bytes(b"\x02")

            assert ws_a.receive_text() == "for a"
            assert ws_a.receive_bytes() == b"\x02"
            assert ws_b.receive_text() == "for b"
            assert ws_b.receive_bytes() == b"\x01"


def test_rejected_origin_gets_no_connection_and_others_still_work() -> None:
    with _client(allowed_origins="http://good.example") as client:
        with pytest.raises(WebSocketDisconnect) as info:
            with client.websocket_connect("/ws", headers={"origin": "http://evil.example"}):
                pass
        assert info.value.code == 1008

        with client.websocket_connect("/ws", headers={"origin": "http://good.example"}) as ws:
            ws.send_text("still fine")
            assert ws.receive_text() == "still fine"


def test_capacity_limit_rejects_then_recovers() -> None:
    with _client(max_connections=1) as client:
        with client.websocket_connect("/ws") as first:
            first.send_text("hold")
            assert first.receive_text() == "hold"
            with pytest.raises(WebSocketDisconnect) as info:
                with client.websocket_connect("/ws"):
                    pass
            assert info.value.code == 1013

        assert client.get("/healthz").json()["connections"]["active"] == 0
        with client.websocket_connect("/ws") as ws:
            ws.send_text("again")
            assert ws.receive_text() == "again"


def test_custom_upgrade_path() -> None:
    with _client(ws_path="/echo") as client:
        with client.websocket_connect("/echo") as ws:
            ws.send_text("custom")
            assert ws.receive_text() == "custom"


def test_favicon_is_empty() -> None:
    with _client() as client:
        response = client.get("/favicon.ico")

    assert response.status_code == 204
    assert response.content == b""


def test_idle_connection_is_closed_and_released() -> None:
    with _client(idle_timeout_s=0.1, watchdog_tick_s=0.02, max_connections=2) as client:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("before idle")
            assert ws.receive_text() == "before idle"
            with pytest.raises(WebSocketDisconnect) as info:
                ws.receive_text()
        assert info.value.code == 4000

        assert client.get("/healthz").json()["connections"]["active"] == 0
        with client.websocket_connect("/ws") as ws:
            ws.send_text("fresh")
            assert ws.receive_text() == "fresh"
