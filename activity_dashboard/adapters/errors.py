"""Errors raised by remote source adapters."""


class FetchError(RuntimeError):
    """Raised when a remote source cannot be read or returns a bad payload."""
