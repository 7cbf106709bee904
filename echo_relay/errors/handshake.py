"""Upgrade negotiation failures."""

from __future__ import annotations


class HandshakeError(Exception):
    """The protocol switch could not be negotiated for one request.

    Carries a machine-readable ``reason`` (``origin_rejected``,
    ``server_at_capacity``, ``accept_failed``, ``not_websocket``) and the
    underlying exception, if any. No Connection exists once this is raised.

    Attributes:
        reason: Machine-parseable rejection identifier.
        message: Human-readable description.
        cause: Exception that interrupted the handshake, if any.
    """

    def __init__(self, reason: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.cause = cause


__all__ = ["HandshakeError"]
