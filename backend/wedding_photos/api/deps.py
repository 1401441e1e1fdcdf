from fastapi import Request

from wedding_photos.config import Settings
from wedding_photos.core.uploads import UploadStore
from wedding_photos.db.storage import Storage


def get_storage(request: Request) -> Storage:
    """The storage instance the running app was created with"""
    return request.app.state.storage


def get_upload_store(request: Request) -> UploadStore:
    return request.app.state.upload_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
