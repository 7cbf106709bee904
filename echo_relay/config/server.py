"""Listener and routing configuration values."""

import os


SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8080"))

WS_PATH = os.getenv("WS_PATH", "/ws")

# 0 disables the admission cap
MAX_CONCURRENT_CONNECTIONS = int(os.getenv("MAX_CONCURRENT_CONNECTIONS", "0"))


__all__ = [
    "SERVER_HOST",
    "SERVER_PORT",
    "WS_PATH",
    "MAX_CONCURRENT_CONNECTIONS",
]
