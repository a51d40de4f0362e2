"""Chat models: channels, messages and reactions."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import StreamModel
from .common import UserRequest


class Attachment(StreamModel):
    type: str | None = None
    title: str | None = None
    title_link: str | None = None
    text: str | None = None
    image_url: str | None = None
    thumb_url: str | None = None
    asset_url: str | None = None
    og_scrape_url: str | None = None
    custom: dict[str, Any] | None = None


class ChannelMember(StreamModel):
    user_id: str | None = None
    channel_role: str | None = None
    custom: dict[str, Any] | None = None


class ChannelInput(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"members", "custom"})

    created_by_id: str | None = None
    team: str | None = None
    disabled: bool | None = None
    frozen: bool | None = None
    auto_translation_enabled: bool | None = None
    members: list[ChannelMember] | None = None
    custom: dict[str, Any] | None = None


class ChannelGetOrCreateRequest(StreamModel):
    data: ChannelInput | None = None
    hide_for_creator: bool | None = None
    state: bool | None = None
    watch: bool | None = None


class UpdateChannelRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset({"add_members", "remove_members"})

    add_members: list[ChannelMember] | None = None
    remove_members: list[str] | None = None
    add_moderators: list[str] | None = None
    demote_moderators: list[str] | None = None
    data: ChannelInput | None = None
    user_id: str | None = None
    hide_history: bool | None = None


class HideChannelRequest(StreamModel):
    user_id: str | None = None
    clear_history: bool | None = None


class ShowChannelRequest(StreamModel):
    user_id: str | None = None


class TruncateChannelRequest(StreamModel):
    user_id: str | None = None
    hard_delete: bool | None = None
    skip_push: bool | None = None
    truncated_at: str | None = None


class MarkReadRequest(StreamModel):
    user_id: str | None = None
    message_id: str | None = None


class MessageRequest(StreamModel):
    omit_empty_fields: ClassVar[frozenset[str]] = frozenset(
        {"attachments", "mentioned_users", "custom"}
    )

    id: str | None = None
    text: str | None = None
    type: str | None = None
    user_id: str | None = None
    parent_id: str | None = None
    show_in_channel: bool | None = None
    silent: bool | None = None
    pinned: bool | None = None
    poll_id: str | None = None
    quoted_message_id: str | None = None
    attachments: list[Attachment] | None = None
    mentioned_users: list[str] | None = None
    custom: dict[str, Any] | None = None


class SendMessageRequest(StreamModel):
    message: MessageRequest | None = None
    skip_push: bool | None = None
    skip_enrich_url: bool | None = None
    pending: bool | None = None


class UpdateMessageRequest(StreamModel):
    message: MessageRequest | None = None
    skip_enrich_url: bool | None = None


class ReactionRequest(StreamModel):
    type: str | None = None
    user_id: str | None = None
    score: int | None = None
    user: UserRequest | None = None
    custom: dict[str, Any] | None = None


class SendReactionRequest(StreamModel):
    reaction: ReactionRequest | None = None
    enforce_unique: bool | None = None
    skip_push: bool | None = None


class SearchPayload(StreamModel):
    filter_conditions: dict[str, Any] | None = None
    message_filter_conditions: dict[str, Any] | None = None
    query: str | None = None
    limit: int | None = None
    next: str | None = None
