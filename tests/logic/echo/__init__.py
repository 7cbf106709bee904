"""Echo regression scenarios against a running server."""

from .runner import run_echo_suite

__all__ = ["run_echo_suite"]
