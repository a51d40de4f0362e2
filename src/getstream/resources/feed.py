"""Single-feed handle and the legacy feed resource."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ..models.feeds import GetOrCreateFeedRequest
from .base import ResourceClient, segment

if TYPE_CHECKING:
    from ..core.client import StreamClient
    from ..core.response import StreamResponse


class Feed(ResourceClient):
    """Operations on one feed, identified by group and id.

    Created through ``client.feed("user", "john")``; not memoized.
    """

    def __init__(self, client: StreamClient, feed_group_id: str, feed_id: str):
        super().__init__(client)
        self.feed_group_id = feed_group_id
        self.feed_id = feed_id

    @property
    def fid(self) -> str:
        return f"{self.feed_group_id}:{self.feed_id}"

    def _path(self) -> str:
        return f"/api/v2/feeds/feed_groups/{segment(self.feed_group_id)}/feeds/{segment(self.feed_id)}"

    def get_or_create_feed(self, request: GetOrCreateFeedRequest | None = None) -> StreamResponse:
        return self._client.make_request(
            "POST", self._path(), body=request or GetOrCreateFeedRequest()
        )

    def delete_feed(self, hard_delete: bool | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE", self._path(), query_params={"hard_delete": hard_delete}
        )

    def __repr__(self) -> str:
        return f"Feed({self.fid!r})"


class FeedResource(ResourceClient):
    """Legacy feed creation endpoint."""

    def create(
        self, feed_slug: str, user_id: str, data: dict[str, Any] | None = None
    ) -> StreamResponse:
        """Create a feed ``<feed_slug>:<user_id>``.

        Args:
            feed_slug: Feed slug (e.g. "user", "timeline").
            user_id: Owner of the feed.
            data: Extra fields, merged over the generated ones.
        """
        now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        feed_data: dict[str, Any] = {
            "id": f"{feed_slug}:{user_id}",
            "created_at": now,
            "updated_at": now,
            **(data or {}),
        }
        return self._client.post(f"/feed/{segment(feed_slug)}/{segment(user_id)}/", feed_data)
