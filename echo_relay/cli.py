"""Command-line entry point: bind the listening socket and serve the app."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import socket

import uvicorn

from .config import Settings
from .errors import FatalStartupError
from .logging import configure_logging
from .server import create_app

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = Settings.from_env()
    parser = argparse.ArgumentParser(description="WebSocket echo server")
    parser.add_argument(
        "--host",
        default=defaults.host,
        help=f"Interface to bind (default env SERVER_HOST or {defaults.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help=f"Port to listen on (default env SERVER_PORT or {defaults.port})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default env APP_LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front so failures surface before serving.

    Raises:
        FatalStartupError: the address could not be bound.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise FatalStartupError(f"listen tcp {host}:{port}: {exc.strerror or exc}") from exc
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings) -> None:
    """Serve until the process is stopped. Bind failures are not retried."""
    sock = bind_socket(settings.host, settings.port)
    logger.info("WebSocket Echo Server starting on port %s", settings.port)
    logger.info("Open http://localhost:%s in your browser", settings.port)

    config = uvicorn.Config(
        create_app(settings),
        log_config=None,
        ws="websockets",
        ws_max_size=settings.max_message_bytes,
        ws_ping_interval=settings.ping_interval_s or None,
        ws_ping_timeout=settings.ping_timeout_s or None,
    )
    uvicorn.Server(config).run(sockets=[sock])


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)
    settings = dataclasses.replace(Settings.from_env(), host=args.host, port=args.port)
    try:
        serve(settings)
    except FatalStartupError as exc:
        logger.critical("ListenAndServe error: %s", exc)
        return 1
    return 0


__all__ = ["bind_socket", "main", "serve"]
