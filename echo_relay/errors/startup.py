"""Process-fatal startup failures."""


class FatalStartupError(Exception):
    """The listening endpoint could not be bound. Not retried."""


__all__ = ["FatalStartupError"]
