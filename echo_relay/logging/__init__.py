"""Logging helpers and context utilities."""

from .context import configure_logging, install_log_context, log_context, reset_log_context, set_log_context

__all__ = [
    "configure_logging",
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
]
