"""Video call endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.video import GetOrCreateCallRequest
from .base import ResourceClient, segment

if TYPE_CHECKING:
    from ..core.response import StreamResponse


class VideoClient(ResourceClient):
    """Video call operations, addressed by call type and id."""

    @staticmethod
    def _call_path(call_type: str, call_id: str) -> str:
        return f"/api/v2/video/call/{segment(call_type)}/{segment(call_id)}"

    def get_or_create_call(
        self,
        call_type: str,
        call_id: str,
        request: GetOrCreateCallRequest | None = None,
    ) -> StreamResponse:
        return self._client.make_request(
            "POST", self._call_path(call_type, call_id), body=request or GetOrCreateCallRequest()
        )

    def get_call(self, call_type: str, call_id: str) -> StreamResponse:
        return self._client.make_request("GET", self._call_path(call_type, call_id))

    def end_call(self, call_type: str, call_id: str) -> StreamResponse:
        return self._client.make_request("POST", f"{self._call_path(call_type, call_id)}/mark_ended")

    def delete_call(self, call_type: str, call_id: str, hard: bool | None = None) -> StreamResponse:
        body = {} if hard is None else {"hard": hard}
        return self._client.make_request(
            "POST", f"{self._call_path(call_type, call_id)}/delete", body=body
        )

    def list_call_types(self) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/video/calltypes")
