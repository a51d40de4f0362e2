"""App-wide endpoints: users, polls, block lists, uploads and permissions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.common import (
    BlockUsersRequest,
    CreateBlockListRequest,
    CreateGuestRequest,
    CreatePollRequest,
    DeactivateUserRequest,
    DeleteUsersRequest,
    FileUploadRequest,
    ImageUploadRequest,
    QueryPollsRequest,
    QueryUsersPayload,
    ReactivateUserRequest,
    UnblockUsersRequest,
    UpdateBlockListRequest,
    UpdateUsersPartialRequest,
    UpdateUsersRequest,
)
from .base import ResourceClient, json_param, segment

if TYPE_CHECKING:
    from ..core.response import StreamResponse


class CommonClient(ResourceClient):
    """Operations shared by chat, feeds and video."""

    def get_app(self) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/app")

    # Users

    def update_users(self, request: UpdateUsersRequest) -> StreamResponse:
        """Create or replace users."""
        return self._client.make_request("POST", "/api/v2/users", body=request)

    def update_users_partial(self, request: UpdateUsersPartialRequest) -> StreamResponse:
        """Set or unset individual user fields."""
        return self._client.make_request("PATCH", "/api/v2/users", body=request)

    def query_users(self, payload: QueryUsersPayload | None = None) -> StreamResponse:
        return self._client.make_request(
            "GET",
            "/api/v2/users",
            query_params={"payload": json_param(payload or QueryUsersPayload())},
        )

    def delete_users(self, request: DeleteUsersRequest) -> StreamResponse:
        """Schedule deletion of users. Returns a task id."""
        return self._client.make_request("POST", "/api/v2/users/delete", body=request)

    def deactivate_user(
        self, user_id: str, request: DeactivateUserRequest | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            f"/api/v2/users/{segment(user_id)}/deactivate",
            body=request or DeactivateUserRequest(),
        )

    def reactivate_user(
        self, user_id: str, request: ReactivateUserRequest | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            f"/api/v2/users/{segment(user_id)}/reactivate",
            body=request or ReactivateUserRequest(),
        )

    def create_guest(self, request: CreateGuestRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/guest", body=request)

    def block_users(self, request: BlockUsersRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/users/block", body=request)

    def unblock_users(self, request: UnblockUsersRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/users/unblock", body=request)

    def get_blocked_users(self, user_id: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "GET", "/api/v2/users/block", query_params={"user_id": user_id}
        )

    # Polls

    def create_poll(self, request: CreatePollRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/polls", body=request)

    def get_poll(self, poll_id: str, user_id: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "GET", f"/api/v2/polls/{segment(poll_id)}", query_params={"user_id": user_id}
        )

    def delete_poll(self, poll_id: str, user_id: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE", f"/api/v2/polls/{segment(poll_id)}", query_params={"user_id": user_id}
        )

    def query_polls(
        self, request: QueryPollsRequest | None = None, user_id: str | None = None
    ) -> StreamResponse:
        return self._client.make_request(
            "POST",
            "/api/v2/polls/query",
            query_params={"user_id": user_id},
            body=request or QueryPollsRequest(),
        )

    # Block lists

    def create_block_list(self, request: CreateBlockListRequest) -> StreamResponse:
        return self._client.make_request("POST", "/api/v2/blocklists", body=request)

    def list_block_lists(self, team: str | None = None) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/blocklists", query_params={"team": team})

    def get_block_list(self, name: str, team: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "GET", f"/api/v2/blocklists/{segment(name)}", query_params={"team": team}
        )

    def update_block_list(self, name: str, request: UpdateBlockListRequest) -> StreamResponse:
        return self._client.make_request(
            "PUT", f"/api/v2/blocklists/{segment(name)}", body=request
        )

    def delete_block_list(self, name: str, team: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE", f"/api/v2/blocklists/{segment(name)}", query_params={"team": team}
        )

    # Uploads

    def upload_file(self, request: FileUploadRequest) -> StreamResponse:
        """Upload a local file (multipart). Returns the CDN ``file`` URL."""
        return self._client.make_request("POST", "/api/v2/uploads/file", body=request)

    def upload_image(self, request: ImageUploadRequest) -> StreamResponse:
        """Upload a local image (multipart), optionally with resized variants."""
        return self._client.make_request("POST", "/api/v2/uploads/image", body=request)

    # Devices, permissions and tasks

    def list_devices(self, user_id: str | None = None) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/devices", query_params={"user_id": user_id})

    def delete_device(self, device_id: str, user_id: str | None = None) -> StreamResponse:
        return self._client.make_request(
            "DELETE", "/api/v2/devices", query_params={"id": device_id, "user_id": user_id}
        )

    def list_roles(self) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/roles")

    def list_permissions(self) -> StreamResponse:
        return self._client.make_request("GET", "/api/v2/permissions")

    def get_task(self, task_id: str) -> StreamResponse:
        return self._client.make_request("GET", f"/api/v2/tasks/{segment(task_id)}")
