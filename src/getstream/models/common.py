"""Models shared across products: users, polls, block lists and uploads."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import StreamModel


class OnlyUserID(StreamModel):
    id: str | None = None


class UserRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"custom", "teams", "teams_role"})

    id: str | None = None
    name: str | None = None
    image: str | None = None
    role: str | None = None
    language: str | None = None
    invisible: bool | None = None
    teams: list[str] | None = None
    teams_role: dict[str, str] | None = None
    custom: dict[str, Any] | None = None


class UpdateUsersRequest(StreamModel):
    users: dict[str, UserRequest] | None = None


class UpdateUserPartialRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"set", "unset"})

    id: str | None = None
    set: dict[str, Any] | None = None
    unset: list[str] | None = None


class UpdateUsersPartialRequest(StreamModel):
    users: list[UpdateUserPartialRequest] | None = None


class DeleteUsersRequest(StreamModel):
    user_ids: list[str] | None = None
    user: str | None = None
    messages: str | None = None
    conversations: str | None = None
    calls: str | None = None
    new_channel_owner_id: str | None = None


class DeactivateUserRequest(StreamModel):
    created_by_id: str | None = None
    mark_messages_deleted: bool | None = None


class ReactivateUserRequest(StreamModel):
    created_by_id: str | None = None
    name: str | None = None
    restore_messages: bool | None = None


class QueryUsersPayload(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"sort"})

    filter_conditions: dict[str, Any] | None = None
    sort: list[dict[str, Any]] | None = None
    limit: int | None = None
    offset: int | None = None
    presence: bool | None = None
    include_deactivated_users: bool | None = None
    user_id: str | None = None


class CreateGuestRequest(StreamModel):
    user: UserRequest | None = None


class BlockUsersRequest(StreamModel):
    blocked_user_id: str | None = None
    user_id: str | None = None


class UnblockUsersRequest(StreamModel):
    blocked_user_id: str | None = None
    user_id: str | None = None


class PollOptionInput(StreamModel):
    text: str | None = None
    custom: dict[str, Any] | None = None


class CreatePollRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"options", "custom"})

    name: str | None = None
    description: str | None = None
    user_id: str | None = None
    voting_visibility: str | None = None
    enforce_unique_vote: bool | None = None
    max_votes_allowed: int | None = None
    allow_answers: bool | None = None
    allow_user_suggested_options: bool | None = None
    is_closed: bool | None = None
    options: list[PollOptionInput] | None = None
    custom: dict[str, Any] | None = None


class QueryPollsRequest(StreamModel):
    filter: dict[str, Any] | None = None
    sort: list[dict[str, Any]] | None = None
    limit: int | None = None
    next: str | None = None
    prev: str | None = None


class CreateBlockListRequest(StreamModel):
    name: str | None = None
    words: list[str] | None = None
    team: str | None = None
    type: str | None = None


class UpdateBlockListRequest(StreamModel):
    words: list[str] | None = None
    team: str | None = None


class ImageSize(StreamModel):
    crop: str | None = None
    height: int | None = None
    width: int | None = None
    resize: str | None = None


class FileUploadRequest(StreamModel):
    """Multipart upload of a local file.

    ``file`` is a path on the local filesystem.
    """

    file: str | None = None
    user: OnlyUserID | None = None


class ImageUploadRequest(StreamModel):
    """Multipart upload of a local image, optionally with resize variants."""

    file: str | None = None
    user: OnlyUserID | None = None
    upload_sizes: list[ImageSize] | None = None
