"""Multipart upload helpers.

File uploads are the only requests not sent as JSON. This module turns a
``FileUploadRequest`` / ``ImageUploadRequest`` into the ``files`` and ``data``
arguments httpx needs for a multipart/form-data body.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..models.base import to_json_value
from ..models.common import FileUploadRequest, ImageUploadRequest
from .errors import APIError

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".json": "application/json",
}


def detect_content_type(file_path: str | Path) -> str:
    """Return the MIME type for ``file_path`` based on its extension."""
    return CONTENT_TYPES.get(Path(file_path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def is_multipart_request(body: Any) -> bool:
    return isinstance(body, (FileUploadRequest, ImageUploadRequest))


@dataclass
class MultipartPayload:
    """Parts of a multipart body, in the shape httpx expects."""

    files: dict[str, tuple[str, bytes, str]]
    data: dict[str, str] = field(default_factory=dict)


def build_multipart(body: FileUploadRequest | ImageUploadRequest) -> MultipartPayload:
    """Validate an upload request and read the file into a multipart payload.

    Raises:
        APIError: If no file path is given or the file does not exist. Raised
            before any network activity.
    """
    if not body.file:
        raise APIError("file name must be provided")

    path = Path(body.file)
    if not path.is_file():
        raise APIError(f"file not found: {body.file}")

    payload = MultipartPayload(
        files={"file": (path.name, path.read_bytes(), detect_content_type(path))}
    )

    if body.user is not None:
        payload.data["user"] = body.user.to_json()

    if isinstance(body, ImageUploadRequest) and body.upload_sizes is not None:
        payload.data["upload_sizes"] = json.dumps(to_json_value(body.upload_sizes))

    return payload
