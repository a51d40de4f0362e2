"""Non-raising result wrapper for transport calls."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import StreamError
from .response import StreamResponse


@dataclass(frozen=True)
class StreamResult:
    """Outcome of one request: either a response or the error that was raised.

    Attributes:
        response: Response envelope when the call succeeded.
        error: ConfigurationError or APIError when it failed.
    """

    response: StreamResponse | None = None
    error: StreamError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, response: StreamResponse) -> StreamResult:
        """Create successful result."""
        return cls(response=response)

    @classmethod
    def fail(cls, error: StreamError) -> StreamResult:
        """Create failed result."""
        return cls(error=error)

    def unwrap(self) -> StreamResponse:
        """Return the response, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
