"""Test suite for echo-relay.

This package contains pytest tests (unit/ and integration/), the CLI smoke
tester ``echo.py`` for a running server, and shared utilities in helpers/.
"""
