"""
Upload validation and the on-disk blob store for guest photos.

Image bytes are opaque to the rest of the application: a photo record only
knows the generated ``filename`` its bytes were stored under.
"""
import io
import logging
import os
import uuid
from typing import List, Optional

from fastapi import UploadFile
from PIL import Image

from wedding_photos.config import Settings
from wedding_photos.core.errors import UploadRejected

logger = logging.getLogger(__name__)


class UploadStore:
    """Stores uploaded image blobs in a single folder, addressed by filename"""

    def __init__(self, folder: str):
        self.folder = folder
        os.makedirs(self.folder, exist_ok=True)

    def path(self, filename: str) -> str:
        # Only bare names generated by save() are addressable
        if not filename or os.path.basename(filename) != filename or filename.startswith("."):
            raise UploadRejected("Invalid filename")
        return os.path.join(self.folder, filename)

    def save(self, data: bytes, original_name: str) -> str:
        """Write ``data`` under a fresh unique filename and return that name"""
        ext = os.path.splitext(original_name or "")[1].lower()
        filename = f"{uuid.uuid4().hex}{ext}"

        with open(os.path.join(self.folder, filename), "wb") as buffer:
            buffer.write(data)

        return filename

    def exists(self, filename: str) -> bool:
        try:
            return os.path.isfile(self.path(filename))
        except UploadRejected:
            return False

    def delete(self, filename: str) -> bool:
        """Remove a stored blob. A blob that is already gone is not an error."""
        if not self.exists(filename):
            return False
        os.remove(self.path(filename))
        return True


def _extension(filename: Optional[str]) -> str:
    return os.path.splitext(filename or "")[1].lower().lstrip(".")


def is_allowed_type(filename: Optional[str], content_type: Optional[str], allowed: List[str]) -> bool:
    """Both the file extension and the declared content type must be an allowed image type"""
    if _extension(filename) not in allowed:
        return False
    if not content_type or not content_type.startswith("image/"):
        return False
    return content_type.split("/", 1)[1].lower() in allowed


def read_validated_upload(file: UploadFile, settings: Settings) -> bytes:
    """
    Validate one uploaded image and return its bytes.

    Checks:
    1. Extension and content type are in ALLOWED_IMAGE_TYPES
    2. File is non-empty and no larger than MAX_UPLOAD_SIZE
    3. Pillow can parse the bytes as an image

    Raises:
        UploadRejected: If any check fails
    """
    if not is_allowed_type(file.filename, file.content_type, settings.ALLOWED_IMAGE_TYPES):
        logger.warning("Rejected upload %s with content type %s", file.filename, file.content_type)
        raise UploadRejected("Only image files are allowed")

    # One byte over the limit is enough to know the file is too large
    data = file.file.read(settings.MAX_UPLOAD_SIZE + 1)
    if len(data) > settings.MAX_UPLOAD_SIZE:
        logger.warning("Rejected upload %s: larger than %d bytes", file.filename, settings.MAX_UPLOAD_SIZE)
        raise UploadRejected(
            f"File too large. Maximum size: {settings.MAX_UPLOAD_SIZE / (1024 * 1024):.1f}MB"
        )
    if not data:
        raise UploadRejected("Empty file")

    try:
        Image.open(io.BytesIO(data)).verify()
    except Exception as e:
        logger.warning("Rejected upload %s: not a readable image (%s)", file.filename, e)
        raise UploadRejected("Invalid image file")

    return data


def validate_upload_batch(files: List[UploadFile], settings: Settings) -> List[bytes]:
    """Validate a whole batch before anything is written, so a bad file rejects the upload"""
    if not files:
        raise UploadRejected("No files uploaded")
    if len(files) > settings.MAX_FILES_PER_UPLOAD:
        raise UploadRejected(f"Too many files. Maximum: {settings.MAX_FILES_PER_UPLOAD}")
    return [read_validated_upload(file, settings) for file in files]
