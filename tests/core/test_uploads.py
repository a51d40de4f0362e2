"""Tests for multipart upload helpers."""

import json

import pytest

from getstream.core.errors import APIError
from getstream.core.uploads import (
    DEFAULT_CONTENT_TYPE,
    build_multipart,
    detect_content_type,
    is_multipart_request,
)
from getstream.models import (
    FileUploadRequest,
    ImageSize,
    ImageUploadRequest,
    OnlyUserID,
    UserRequest,
)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("a.png", "image/png"),
        ("a.jpg", "image/jpeg"),
        ("a.JPEG", "image/jpeg"),
        ("a.gif", "image/gif"),
        ("a.pdf", "application/pdf"),
        ("a.txt", "text/plain"),
        ("a.json", "application/json"),
        ("a.bin", DEFAULT_CONTENT_TYPE),
        ("no_extension", DEFAULT_CONTENT_TYPE),
    ],
)
def test_detect_content_type(file_name, expected):
    assert detect_content_type(file_name) == expected


def test_is_multipart_request():
    assert is_multipart_request(FileUploadRequest(file="a.txt"))
    assert is_multipart_request(ImageUploadRequest(file="a.png"))
    assert not is_multipart_request(UserRequest(id="john"))
    assert not is_multipart_request({"file": "a.txt"})
    assert not is_multipart_request(None)


class TestBuildMultipart:
    """Tests for build_multipart."""

    def test_file_only(self, tmp_path):
        path = tmp_path / "report.pdf"
        path.write_bytes(b"%PDF")

        payload = build_multipart(FileUploadRequest(file=str(path)))

        assert payload.files == {"file": ("report.pdf", b"%PDF", "application/pdf")}
        assert payload.data == {}

    def test_user_part(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hi", encoding="utf-8")

        payload = build_multipart(FileUploadRequest(file=str(path), user=OnlyUserID(id="john")))

        assert json.loads(payload.data["user"]) == {"id": "john"}

    def test_image_upload_sizes(self, tmp_path):
        path = tmp_path / "avatar.jpg"
        path.write_bytes(b"jpeg")
        request = ImageUploadRequest(
            file=str(path),
            user=OnlyUserID(id="john"),
            upload_sizes=[ImageSize(width=100, height=100, crop="center")],
        )

        payload = build_multipart(request)

        assert payload.files["file"][2] == "image/jpeg"
        assert json.loads(payload.data["upload_sizes"]) == [
            {"crop": "center", "height": 100, "width": 100}
        ]

    @pytest.mark.parametrize("file_name", [None, ""])
    def test_file_name_required(self, file_name):
        with pytest.raises(APIError, match="file name must be provided"):
            build_multipart(FileUploadRequest(file=file_name))

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "gone.png"

        with pytest.raises(APIError) as exc_info:
            build_multipart(ImageUploadRequest(file=str(missing)))

        assert exc_info.value.message == f"file not found: {missing}"
        assert exc_info.value.status_code is None
