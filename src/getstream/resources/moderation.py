"""Moderation endpoints: bans, mutes, flags and content checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.moderation import (
    BanRequest,
    CheckRequest,
    FlagRequest,
    ModerationPayload,
    MuteRequest,
    UnbanRequest,
    UnmuteRequest,
)
from .base import ResourceClient

if TYPE_CHECKING:
    from ..core.response import StreamResponse


class ModerationClient(ResourceClient):
    """Moderation operations."""

    def ban(self, request: BanRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/moderation/ban", body=request)

    def unban(
        self,
        request: UnbanRequest,
        target_user_id: str,
        channel_cid: str | None = None,
        created_by: str | None = None,
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            "/api/v2/moderation/unban",
            query_params={
                "target_user_id": target_user_id,
                "channel_cid": channel_cid,
                "created_by": created_by,
            },
            body=request,
        )

    def mute(self, request: MuteRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/moderation/mute", body=request)

    def unmute(self, request: UnmuteRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/moderation/unmute", body=request)

    def flag(self, request: FlagRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/moderation/flag", body=request)

    def check(self, request: CheckRequest) -> StreamResponse:
        """Run content through the moderation engine."""
        return self._client.make_request("POST", "/api/v2/moderation/check", body=request)

    def check_user_profile(
        self,
        user_id: str,
        username: str | None = None,
        image: str | None = None,
    ) -> StreamResponse:
        """Check a user profile (username and/or image URL) without creating review items.

        Experimental: the server-side behaviour may change.

        Raises:
            ValueError: If neither ``username`` nor ``image`` is given.
        """
        if username is None and image is None:
            raise ValueError("Either username or image must be provided")

        payload = ModerationPayload(
            texts=[username] if username is not None else None,
            images=[image] if image is not None else None,
        )
        request = CheckRequest(
            entity_type="userprofile",
            entity_id=user_id,
            entity_creator_id=user_id,
            moderation_payload=payload,
            config_key="user_profile:default",
            options={"force_sync": True, "test_mode": True},
        )
        return self.check(request)
