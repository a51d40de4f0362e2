"""Dynamic wrapper around decoded API responses."""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

_MISSING = object()


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return StreamResponse(value)
    if isinstance(value, list):
        return [StreamResponse(item) if isinstance(item, dict) else item for item in value]
    return value


class StreamResponse:
    """Read-only view over a decoded JSON value.

    Fields are reachable as attributes; nested objects come back as
    ``StreamResponse`` and lists have their object items wrapped. A missing
    field yields ``None`` rather than raising.

    The method names ``get``, ``keys``, ``lookup``, ``to_dict`` and ``to_json``
    take precedence over fields of the same name; read such fields with
    ``resp["keys"]`` instead.

    Example:
        ```python
        resp = client.feeds.add_activity(request)
        print(resp.activity.id)
        for reaction in resp.activity.latest_reactions or []:
            print(reaction.type)
        ```
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any):
        object.__setattr__(self, "_data", data)

    def _raw(self, key: str) -> Any:
        data = self._data
        if not isinstance(data, dict):
            return _MISSING
        if key in data:
            return data[key]
        # Some decoders hand back bytes keys
        encoded = key.encode("utf-8")
        if encoded in data:
            return data[encoded]
        return _MISSING

    def lookup(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` so a JSON null can be told apart from absence."""
        value = self._raw(key)
        if value is _MISSING:
            return None, False
        return _wrap(value), True

    def get(self, key: str, default: Any = None) -> Any:
        value, found = self.lookup(key)
        return value if found else default

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("StreamResponse is read-only")

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self._data,)

    def __getitem__(self, key: str) -> Any:
        value, found = self.lookup(key)
        if not found:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._raw(key) is not _MISSING

    def __iter__(self) -> Iterator[Any]:
        if isinstance(self._data, dict):
            return iter(self._data)
        return iter(())

    def keys(self) -> list[Any]:
        return list(self._data) if isinstance(self._data, dict) else []

    def to_dict(self) -> Any:
        """Return the wrapped value unchanged. Treat it as read-only."""
        return self._data

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self._data, **kwargs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StreamResponse):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<StreamResponse data={self._data!r}>"
