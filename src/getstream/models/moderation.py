"""Moderation models: bans, mutes, flags and content checks."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import StreamModel


class BanRequest(StreamModel):
    target_user_id: str | None = None
    banned_by_id: str | None = None
    channel_cid: str | None = None
    reason: str | None = None
    timeout: int | None = None
    shadow: bool | None = None
    ip_ban: bool | None = None


class UnbanRequest(StreamModel):
    unbanned_by_id: str | None = None


class MuteRequest(StreamModel):
    target_ids: list[str] | None = None
    user_id: str | None = None
    timeout: int | None = None


class UnmuteRequest(StreamModel):
    target_ids: list[str] | None = None
    user_id: str | None = None


class FlagRequest(StreamModel):
    entity_id: str | None = None
    entity_type: str | None = None
    entity_creator_id: str | None = None
    reason: str | None = None
    user_id: str | None = None
    custom: dict[str, Any] | None = None


class ModerationPayload(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"texts", "images", "videos"})

    texts: list[str] | None = None
    images: list[str] | None = None
    videos: list[str] | None = None
    custom: dict[str, Any] | None = None


class CheckRequest(StreamModel):
    entity_type: str | None = None
    entity_id: str | None = None
    entity_creator_id: str | None = None
    config_key: str | None = None
    moderation_payload: ModerationPayload | None = None
    options: dict[str, Any] | None = None
    test_mode: bool | None = None
