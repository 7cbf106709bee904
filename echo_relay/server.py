"""FastAPI application for the echo relay.

The app is built by ``create_app`` from a ``Settings`` value. Everything the
routes need (registry, upgrader, optional idle watchdog factory) is
constructed once there and closed over by the router, so no module-level
mutable state exists.

Routes:
    GET /          static HTML test page
    GET /healthz   liveness plus connection counts
    WS  /ws        upgrade path; each connection runs its own EchoSession
    GET /ws        plain HTTP on the upgrade path, answered with 400

Example:
    Run through the CLI:
        $ python -m echo_relay --port 8080

    Or with uvicorn directly:
        $ uvicorn echo_relay.server:create_app --factory --port 8080
"""

from __future__ import annotations

import functools
import logging
from importlib import resources

from fastapi import APIRouter, FastAPI, Request, WebSocket
from fastapi.responses import HTMLResponse, ORJSONResponse

from .config import Settings
from .errors import HandshakeError
from .handlers.connections import ConnectionRegistry
from .handlers.websocket import (
    ConnectionUpgrader,
    WebSocketLifecycle,
    build_origin_policy,
    handle_websocket_connection,
)
from .handlers.websocket.manager import LifecycleFactory

logger = logging.getLogger(__name__)

# Advertised on a failed upgrade so clients know which protocol version to retry with
_WS_VERSION_HEADER = {"Sec-WebSocket-Version": "13"}


@functools.lru_cache(maxsize=1)
def load_index_html() -> str:
    """Return the bundled test page."""
    return (resources.files("echo_relay") / "static" / "index.html").read_text(encoding="utf-8")


def build_router(
    upgrader: ConnectionUpgrader,
    *,
    ws_path: str = "/ws",
    lifecycle_factory: LifecycleFactory | None = None,
) -> APIRouter:
    """Build the route table once; it is read-only after startup."""
    router = APIRouter()
    registry = upgrader.registry

    @router.get("/", response_class=HTMLResponse)
    async def home() -> HTMLResponse:
        return HTMLResponse(load_index_html())

    @router.get("/healthz")
    async def healthz():
        connections = registry.capacity_info() if registry is not None else {}
        return {"status": "ok", "connections": connections}

    @router.get("/favicon.ico", status_code=204)
    async def favicon():
        """Suppress favicon requests from browsers."""
        return None

    @router.websocket(ws_path)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await handle_websocket_connection(websocket, upgrader, lifecycle_factory)

    @router.get(ws_path)
    async def upgrade_required(request: Request):
        raise upgrader.reject_plain_request(request)

    return router


async def _handshake_error_handler(request: Request, exc: HandshakeError) -> ORJSONResponse:
    logger.warning("Upgrade error: %s", exc.message)
    return ORJSONResponse(
        status_code=400,
        content={"error": exc.reason, "message": exc.message},
        headers=_WS_VERSION_HEADER,
    )


def _lifecycle_factory(settings: Settings) -> LifecycleFactory | None:
    if not settings.idle_timeout_enabled:
        return None
    return functools.partial(
        WebSocketLifecycle,
        idle_timeout_s=settings.idle_timeout_s,
        watchdog_tick_s=settings.watchdog_tick_s,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the echo relay application."""
    settings = settings or Settings.from_env()
    registry = ConnectionRegistry(settings.max_connections)
    upgrader = ConnectionUpgrader(build_origin_policy(settings.allowed_origins), registry)

    app = FastAPI(title="Echo Relay", default_response_class=ORJSONResponse)
    app.include_router(
        build_router(
            upgrader,
            ws_path=settings.ws_path,
            lifecycle_factory=_lifecycle_factory(settings),
        )
    )
    app.add_exception_handler(HandshakeError, _handshake_error_handler)
    app.state.settings = settings
    app.state.registry = registry
    return app


__all__ = ["build_router", "create_app", "load_index_html"]
