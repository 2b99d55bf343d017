"""Exception types raised by sequences and producers."""

from typing import Optional


class IterationProtocolError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(IterationProtocolError, ValueError):
    """Raised when a producer or config is constructed with invalid options."""


class NetworkFailure(IterationProtocolError):
    """Raised when a remote request fails or returns a malformed payload."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Request to {url} failed: {reason}")
