"""Chat endpoints: channels, messages, reactions and channel uploads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..models.chat import (
    ChannelGetOrCreateRequest,
    HideChannelRequest,
    MarkReadRequest,
    SearchPayload,
    SendMessageRequest,
    SendReactionRequest,
    ShowChannelRequest,
    TruncateChannelRequest,
    UpdateChannelRequest,
    UpdateMessageRequest,
)
from ..models.common import FileUploadRequest, ImageUploadRequest
from .base import ResourceClient, json_param, segment

if TYPE_CHECKING:
    from ..core.response import StreamResponse


class ChatClient(ResourceClient):
    """Chat operations, addressed by channel type and id."""

    @staticmethod
    def _channel_path(channel_type: str, channel_id: str) -> str:
        return f"/api/v2/chat/channels/{segment(channel_type)}/{segment(channel_id)}"

    # Channels

    def get_or_create_channel(
        self,
        channel_type: str,
        channel_id: str,
        request: ChannelGetOrCreateRequest | None = None,
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            f"{self._channel_path(channel_type, channel_id)}/query",
            body=request or ChannelGetOrCreateRequest(),
        )

    def update_channel(
        self, channel_type: str, channel_id: str, request: UpdateChannelRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", self._channel_path(channel_type, channel_id), body=request
        )

    def update_channel_partial(
        self, channel_type: str, channel_id: str, body: dict[str, Any]
    ) -> StreamResponse:
        """Set/unset channel fields, e.g. ``{"set": {"color": "blue"}, "user_id": "john"}``."""
        return self._client.make_request(
            "PATCH", self._channel_path(channel_type, channel_id), body=body
        )

    def delete_channel(
        self, channel_type: str, channel_id: str, hard_delete: bool | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            self._channel_path(channel_type, channel_id),
            query_params={"hard_delete": hard_delete},
        )

    def hide_channel(
        self, channel_type: str, channel_id: str, request: HideChannelRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/hide", body=request
        )

    def show_channel(
        self, channel_type: str, channel_id: str, request: ShowChannelRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/show", body=request
        )

    def truncate_channel(
        self,
        channel_type: str,
        channel_id: str,
        request: TruncateChannelRequest | None = None,
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            f"{self._channel_path(channel_type, channel_id)}/truncate",
            body=request or TruncateChannelRequest(),
        )

    def mark_read(
        self, channel_type: str, channel_id: str, request: MarkReadRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/read", body=request
        )

    # Messages

    def send_message(
        self, channel_type: str, channel_id: str, request: SendMessageRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/message", body=request
        )

    def get_message(self, message_id: str) -> StreamResponse:
        return self._client.make_request("GET", f"/api/v2/chat/messages/{segment(message_id)}")

    def update_message(self, message_id: str, request: UpdateMessageRequest) -> StreamResponse:
        return self._client.make_request(
            "POST", f"/api/v2/chat/messages/{segment(message_id)}", body=request
        )

    def delete_message(
        self,
        message_id: str,
        hard: bool | None = None,
        deleted_by: str | None = None,
    ) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"/api/v2/chat/messages/{segment(message_id)}",
            query_params={"hard": hard, "deleted_by": deleted_by},
        )

    def get_replies(self, parent_id: str, limit: int | None = None) -> StreamResponse:
        return self._client.make_request(
            "GET",
            f"/api/v2/chat/messages/{segment(parent_id)}/replies",
            query_params={"limit": limit},
        )

    def search(self, payload: SearchPayload) -> StreamResponse:
        """Full-text message search; the payload travels JSON-encoded in the query string."""
        return self._client.make_request(
            "GET", "/api/v2/chat/search", query_params={"payload": json_param(payload)}
        )

    # Reactions

    def send_reaction(self, message_id: str, request: SendReactionRequest) -> StreamResponse:
        return self._client.make_request(
            "POST", f"/api/v2/chat/messages/{segment(message_id)}/reaction", body=request
        )

    def delete_reaction(
        self, message_id: str, reaction_type: str, user_id: str | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"/api/v2/chat/messages/{segment(message_id)}/reaction/{segment(reaction_type)}",
            query_params={"user_id": user_id},
        )

    def get_reactions(
        self, message_id: str, limit: int | None = None, offset: int | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "GET",
            f"/api/v2/chat/messages/{segment(message_id)}/reactions",
            query_params={"limit": limit, "offset": offset},
        )

    # Channel uploads

    def upload_channel_file(
        self, channel_type: str, channel_id: str, request: FileUploadRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/file", body=request
        )

    def delete_channel_file(self, channel_type: str, channel_id: str, url: str) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"{self._channel_path(channel_type, channel_id)}/file",
            query_params={"url": url},
        )

    def upload_channel_image(
        self, channel_type: str, channel_id: str, request: ImageUploadRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"{self._channel_path(channel_type, channel_id)}/image", body=request
        )

    def delete_channel_image(self, channel_type: str, channel_id: str, url: str) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"{self._channel_path(channel_type, channel_id)}/image",
            query_params={"url": url},
        )
