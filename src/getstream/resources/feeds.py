"""Activity feed endpoints: activities, comments, reactions and follows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.feeds import (
    AddActivityRequest,
    AddCommentRequest,
    AddReactionRequest,
    FollowRequest,
    QueryActivitiesRequest,
    UpdateActivityRequest,
)
from .base import ResourceClient, segment

if TYPE_CHECKING:
    from ..core.response import StreamResponse


class FeedsClient(ResourceClient):
    """Feed operations that are not scoped to a single feed."""

    def add_activity(self, request: AddActivityRequest) -> StreamResponse:
        """Add an activity to one or more feeds."""
        return self._client.make_request("POST", "/api/v2/feeds/activities", body=request)

    def get_activity(self, activity_id: str) -> StreamResponse:
        return self._client.make_request("GET", f"/api/v2/feeds/activities/{segment(activity_id)}")

    def update_activity(self, activity_id: str, request: UpdateActivityRequest) -> StreamResponse:
        return self._client.make_request(
            "PUT", f"/api/v2/feeds/activities/{segment(activity_id)}", body=request
        )

    def delete_activity(self, activity_id: str, hard_delete: bool | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"/api/v2/feeds/activities/{segment(activity_id)}",
            query_params={"hard_delete": hard_delete},
        )

    def query_activities(self, request: QueryActivitiesRequest | None = None) -> StreamResponse:
        return self._client.make_request(
            "POST", "/api/v2/feeds/activities/query", body=request or QueryActivitiesRequest()
        )

    def add_comment(self, request: AddCommentRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/feeds/comments", body=request)

    def delete_comment(self, comment_id: str, hard_delete: bool | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"/api/v2/feeds/comments/{segment(comment_id)}",
            query_params={"hard_delete": hard_delete},
        )

    def add_activity_reaction(
        self, activity_id: str, request: AddReactionRequest
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", f"/api/v2/feeds/activities/{segment(activity_id)}/reactions", body=request
        )

    def delete_activity_reaction(
        self, activity_id: str, reaction_type: str, user_id: str | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "DELETE",
            f"/api/v2/feeds/activities/{segment(activity_id)}/reactions/{segment(reaction_type)}",
            query_params={"user_id": user_id},
        )

    def follow(self, request: FollowRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/feeds/follows", body=request)

    def unfollow(self, source: str, target: str) -> StreamResponse:
        """Remove a follow between two feeds given as ``group:id``."""
        return self._client.make_request(
            "DELETE", f"/api/v2/feeds/follows/{segment(source)}/{segment(target)}"
        )
