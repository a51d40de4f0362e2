"""Activity feed models."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import StreamModel
from .chat import Attachment


class AddActivityRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset(
        {"attachments", "mentioned_user_ids", "filter_tags", "interest_tags", "custom"}
    )

    type: str | None = None
    feeds: list[str] | None = None
    id: str | None = None
    text: str | None = None
    user_id: str | None = None
    visibility: str | None = None
    parent_id: str | None = None
    poll_id: str | None = None
    expires_at: str | None = None
    attachments: list[Attachment] | None = None
    mentioned_user_ids: list[str] | None = None
    filter_tags: list[str] | None = None
    interest_tags: list[str] | None = None
    custom: dict[str, Any] | None = None


class UpdateActivityRequest(StreamModel):
    text: str | None = None
    user_id: str | None = None
    visibility: str | None = None
    attachments: list[Attachment] | None = None
    custom: dict[str, Any] | None = None


class QueryActivitiesRequest(StreamModel):
    filter: dict[str, Any] | None = None
    sort: list[dict[str, Any]] | None = None
    limit: int | None = None
    next: str | None = None
    prev: str | None = None


class AddCommentRequest(StreamModel):
    comment: str | None = None
    object_id: str | None = None
    object_type: str | None = None
    parent_id: str | None = None
    user_id: str | None = None
    attachments: list[Attachment] | None = None
    custom: dict[str, Any] | None = None


class AddReactionRequest(StreamModel):
    type: str | None = None
    user_id: str | None = None
    create_notification_activity: bool | None = None
    custom: dict[str, Any] | None = None


class FollowRequest(StreamModel):
    source: str | None = None
    target: str | None = None
    push_preference: str | None = None
    custom: dict[str, Any] | None = None


class GetOrCreateFeedRequest(StreamModel):
    user_id: str | None = None
    limit: int | None = None
    watch: bool | None = None
    data: dict[str, Any] | None = None
