"""Error types raised by the property search tool."""

from __future__ import annotations

from typing import Optional, Sequence


class PropertySearchError(Exception):
    """Base class for every failure surfaced to the tool caller."""


class ValidationError(PropertySearchError):
    """Search parameters were rejected before any request was sent."""

    def __init__(self, message: str, fields: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class RemoteApiError(PropertySearchError):
    """The property API answered with a non-success status."""

    def __init__(self, status_code: int, status_text: str):
        super().__init__(f"API Error {status_code}: {status_text}")
        self.status_code = status_code
        self.status_text = status_text


class NoResponseError(PropertySearchError):
    """The request went out but no response came back."""

    def __init__(self, message: str = "No response from API server."):
        super().__init__(message)


class RequestFailedError(PropertySearchError):
    """Catch-all for failures building or completing the request."""

    def __init__(self, reason: str):
        super().__init__(f"Request failed: {reason}")
        self.reason = reason


__all__ = [
    "PropertySearchError",
    "ValidationError",
    "RemoteApiError",
    "NoResponseError",
    "RequestFailedError",
]
