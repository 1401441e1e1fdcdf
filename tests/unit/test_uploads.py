"""
Unit tests for upload validation and the blob store.
"""

import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from wedding_photos.config import Settings
from wedding_photos.core.errors import UploadRejected
from wedding_photos.core.uploads import (
    UploadStore,
    is_allowed_type,
    read_validated_upload,
    validate_upload_batch,
)


def make_upload(data: bytes, filename: str = "photo.png", content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestAllowedTypes:

    @pytest.mark.parametrize("filename,content_type", [
        ("a.jpg", "image/jpeg"),
        ("a.JPEG", "image/jpeg"),
        ("a.png", "image/png"),
        ("a.gif", "image/gif"),
        ("a.webp", "image/webp"),
    ])
    def test_allowed(self, filename, content_type):
        assert is_allowed_type(filename, content_type, Settings().ALLOWED_IMAGE_TYPES)

    @pytest.mark.parametrize("filename,content_type", [
        ("a.txt", "text/plain"),
        ("a.png", "text/plain"),
        ("a.txt", "image/png"),
        ("a.heic", "image/heic"),
        ("noextension", "image/png"),
        (None, None),
    ])
    def test_rejected(self, filename, content_type):
        assert not is_allowed_type(filename, content_type, Settings().ALLOWED_IMAGE_TYPES)


class TestReadValidatedUpload:

    def test_valid_image(self, make_image):
        data = make_image()
        assert read_validated_upload(make_upload(data), Settings()) == data

    def test_wrong_type(self, make_image):
        with pytest.raises(UploadRejected, match="Only image files"):
            read_validated_upload(make_upload(make_image(), "notes.txt", "text/plain"), Settings())

    def test_too_large(self, make_image):
        data = make_image(size=(200, 200))
        settings = Settings(MAX_UPLOAD_SIZE=len(data) - 1)

        with pytest.raises(UploadRejected, match="too large"):
            read_validated_upload(make_upload(data), settings)

    def test_empty_file(self):
        with pytest.raises(UploadRejected, match="Empty"):
            read_validated_upload(make_upload(b""), Settings())

    def test_not_an_image(self):
        with pytest.raises(UploadRejected, match="Invalid image"):
            read_validated_upload(make_upload(b"definitely not a png"), Settings())


class TestValidateUploadBatch:

    def test_zero_files(self):
        with pytest.raises(UploadRejected, match="No files"):
            validate_upload_batch([], Settings())

    def test_too_many_files(self, make_image):
        files = [make_upload(make_image()) for _ in range(3)]

        with pytest.raises(UploadRejected, match="Too many"):
            validate_upload_batch(files, Settings(MAX_FILES_PER_UPLOAD=2))

    def test_one_bad_file_rejects_batch(self, make_image):
        files = [make_upload(make_image()), make_upload(b"text", "a.txt", "text/plain")]

        with pytest.raises(UploadRejected):
            validate_upload_batch(files, Settings())


class TestUploadStore:

    def test_save_and_delete(self, tmp_path):
        store = UploadStore(str(tmp_path))

        filename = store.save(b"bytes", "Wedding Photo.JPG")

        assert filename.endswith(".jpg")
        assert (tmp_path / filename).read_bytes() == b"bytes"
        assert store.exists(filename)
        assert store.delete(filename) is True
        assert not (tmp_path / filename).exists()
        assert store.delete(filename) is False

    def test_filenames_are_unique(self, tmp_path):
        store = UploadStore(str(tmp_path))
        names = {store.save(b"x", "same.png") for _ in range(10)}
        assert len(names) == 10

    @pytest.mark.parametrize("filename", ["../secret.png", "nested/a.png", ".hidden", ""])
    def test_rejects_paths_outside_folder(self, tmp_path, filename):
        store = UploadStore(str(tmp_path))

        assert store.exists(filename) is False
        with pytest.raises(UploadRejected):
            store.path(filename)
