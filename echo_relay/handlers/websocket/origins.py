"""Origin policies consulted before accepting an upgrade.

A policy is any callable taking the inbound request and returning whether
the upgrade may proceed. Browsers always send ``Origin``; non-browser
clients usually do not, so every policy here accepts a request that carries
no Origin header at all.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from urllib.parse import urlsplit

from starlette.requests import HTTPConnection

OriginPolicy = Callable[[HTTPConnection], bool]

ALLOW_ALL = "*"
SAME_ORIGIN = "same-origin"


def _normalize_origin(value: str) -> str:
    return value.strip().rstrip("/").lower()


def allow_all_origins(conn: HTTPConnection) -> bool:
    """Accept every origin. Unsafe outside local testing."""
    return True


def same_origin(conn: HTTPConnection) -> bool:
    """Accept when the Origin host matches the Host header."""
    origin = conn.headers.get("origin")
    if not origin:
        return True
    netloc = urlsplit(origin).netloc.lower()
    return bool(netloc) and netloc == conn.headers.get("host", "").lower()


def allow_origins(origins: Iterable[str]) -> OriginPolicy:
    """Build a policy accepting only the listed origins."""
    allowed = frozenset(_normalize_origin(origin) for origin in origins if origin.strip())

    def policy(conn: HTTPConnection) -> bool:
        origin = conn.headers.get("origin")
        if not origin:
            return True
        return _normalize_origin(origin) in allowed

    return policy


def build_origin_policy(value: str | None) -> OriginPolicy:
    """Map the ``WS_ALLOWED_ORIGINS`` setting to a policy."""
    text = (value or ALLOW_ALL).strip()
    if text in {"", ALLOW_ALL}:
        return allow_all_origins
    if text.lower() == SAME_ORIGIN:
        return same_origin
    return allow_origins(text.split(","))


__all__ = [
    "OriginPolicy",
    "allow_all_origins",
    "allow_origins",
    "build_origin_policy",
    "same_origin",
]
