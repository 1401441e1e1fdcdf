import os
import logging

from wedding_photos.config import Settings
from wedding_photos.core.uploads import UploadStore
from wedding_photos.db.memory import MemoryStorage
from wedding_photos.db.storage import Storage

logger = logging.getLogger(__name__)


def init_db(settings: Settings) -> Storage:
    # Check if uploads folder exists
    if not os.path.exists(settings.UPLOAD_FOLDER):
        os.makedirs(settings.UPLOAD_FOLDER)

    storage = MemoryStorage()
    logger.info("Initialised in-memory storage, uploads in %s", os.path.abspath(settings.UPLOAD_FOLDER))
    return storage


def init_upload_store(settings: Settings) -> UploadStore:
    return UploadStore(settings.UPLOAD_FOLDER)
