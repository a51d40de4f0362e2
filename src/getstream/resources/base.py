"""Shared plumbing for resource groups."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ..models.base import to_json_value

if TYPE_CHECKING:
    from ..core.client import StreamClient


def segment(value: Any) -> str:
    """Escape one path segment. ``:`` is kept so feed ids like ``user:john`` stay readable."""
    return quote(str(value), safe=":")


def json_param(payload: Any) -> str:
    """Encode a query-string ``payload`` parameter the way GET search endpoints expect."""
    return json.dumps(to_json_value(payload))


class ResourceClient:
    """Base class for resource groups.

    Holds a back-reference to the owning :class:`StreamClient`; never owns a
    connection of its own.
    """

    def __init__(self, client: StreamClient):
        self._client = client

    @property
    def client(self) -> StreamClient:
        return self._client
