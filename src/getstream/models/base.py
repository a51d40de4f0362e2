"""Base class for generated request/response models."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="StreamModel")


def _is_empty(value: Any) -> bool:
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def to_json_value(value: Any) -> Any:
    """Convert a field value into its JSON-ready form."""
    if isinstance(value, StreamModel):
        return value.to_json_dict()
    if isinstance(value, Mapping):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class StreamModel(BaseModel):
    """Data-transfer object with optional fields.

    Serialization rules:

    - ``to_dict()`` returns every declared field, unset ones as ``None``.
    - ``to_json_dict()`` drops ``None`` values, and for the fields listed in
      ``omit_empty_fields`` also drops ``""``, ``[]`` and ``{}``.

    Unknown keys in the input mapping are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    omit_empty_fields: ClassVar[frozenset[str]] = frozenset()

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    def to_json_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        omit_empty = type(self).omit_empty_fields
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if name in omit_empty and _is_empty(value):
                continue
            result[name] = to_json_value(value)
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_json_dict())

    @classmethod
    def from_dict(cls: type[M], data: Mapping[str, Any] | None) -> M:
        return cls.model_validate(dict(data or {}))

    @classmethod
    def from_json(cls: type[M], raw: str | bytes) -> M:
        return cls.from_dict(json.loads(raw))

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
