"""Video call models."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import StreamModel


class CallMember(StreamModel):
    user_id: str | None = None
    role: str | None = None
    custom: dict[str, Any] | None = None


class CallRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"members", "custom"})

    created_by_id: str | None = None
    team: str | None = None
    starts_at: str | None = None
    video: bool | None = None
    members: list[CallMember] | None = None
    custom: dict[str, Any] | None = None


class GetOrCreateCallRequest(StreamModel):
    data: CallRequest | None = None
    members_limit: int | None = None
    notify: bool | None = None
    ring: bool | None = None
    video: bool | None = None
