"""Exceptions raised by the Stream SDK.

Two kinds reach callers:

- ``ConfigurationError``: missing or invalid configuration, raised before any network activity.
- ``APIError``: non-2xx responses, connection failures and upload preconditions.
"""

from __future__ import annotations

from typing import Any


class StreamError(Exception):
    """Base error class for the Stream SDK."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for logging or JSON output."""
        return {"error": self.message, "type": type(self).__name__}


class ConfigurationError(StreamError):
    """Configuration is missing (API key or secret) or holds an invalid value."""


class APIError(StreamError):
    """A request failed, either at the HTTP level or before reaching the server.

    Attributes:
        message: Human-readable reason.
        status_code: HTTP status when the server answered, else None.
        body: Decoded response body when available.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code is not None:
            result["status_code"] = self.status_code
        return result
