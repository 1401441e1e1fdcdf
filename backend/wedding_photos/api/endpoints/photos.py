import logging
from typing import Any, List

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse

from wedding_photos import schemas
from wedding_photos.api import deps
from wedding_photos.config import Settings
from wedding_photos.core.errors import NotFoundError
from wedding_photos.core.uploads import UploadStore, validate_upload_batch
from wedding_photos.db.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

# Served outside the API prefix, at /uploads
files_router = APIRouter()


@router.post("/events/{event_id}/photos", response_model=List[schemas.Photo])
def upload_photos(
        *,
        storage: Storage = Depends(deps.get_storage),
        upload_store: UploadStore = Depends(deps.get_upload_store),
        settings: Settings = Depends(deps.get_settings),
        event_id: int,
        photos: List[UploadFile] = File(None),
        contributor_name: str = Form(None, alias="contributorName"),
        caption: str = Form(None),
) -> Any:
    """
    Upload one or more photos to an event.

    The whole batch is validated before any file is stored.
    """
    if not storage.get_event(event_id):
        raise NotFoundError.for_entity("Event")

    blobs = validate_upload_batch(photos or [], settings)

    # Store every blob before creating any record; a failed write removes the ones already saved
    filenames = []
    try:
        for file, data in zip(photos, blobs):
            filenames.append(upload_store.save(data, file.filename))
    except Exception:
        logger.error("Failed storing upload batch for event %d, removing %d saved files",
                     event_id, len(filenames))
        for filename in filenames:
            upload_store.delete(filename)
        raise

    created = []
    for file, filename in zip(photos, filenames):
        photo = storage.create_photo(
            schemas.PhotoCreate(
                event_id=event_id,
                filename=filename,
                original_name=file.filename,
                contributor_name=contributor_name,
                caption=caption,
            )
        )
        created.append(photo)

    logger.info("Stored %d photos for event %d", len(created), event_id)
    return created


@router.get("/events/{event_id}/photos", response_model=List[schemas.Photo])
def read_photos(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
) -> Any:
    """
    Retrieve an event's photos, most recent upload first.
    """
    return storage.list_photos_by_event(event_id)


@router.get("/photos/{photo_id}", response_model=schemas.Photo)
def read_photo(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
) -> Any:
    """
    Get photo by ID.
    """
    photo = storage.get_photo(photo_id)
    if not photo:
        raise NotFoundError.for_entity("Photo")
    return photo


@router.patch("/photos/{photo_id}", response_model=schemas.Photo)
def update_photo(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
        photo_in: schemas.PhotoUpdate,
) -> Any:
    """
    Update photo caption or contributor.
    """
    photo = storage.update_photo(photo_id, photo_in)
    if not photo:
        raise NotFoundError.for_entity("Photo")
    return photo


@router.delete("/photos/{photo_id}")
def delete_photo(
        *,
        storage: Storage = Depends(deps.get_storage),
        upload_store: UploadStore = Depends(deps.get_upload_store),
        photo_id: int,
) -> Any:
    """
    Delete photo and its stored image.
    """
    photo = storage.get_photo(photo_id)
    if not photo:
        raise NotFoundError.for_entity("Photo")

    # Delete photo file
    upload_store.delete(photo.filename)

    if not storage.delete_photo(photo_id):
        # Removed by a concurrent request in the meantime
        raise NotFoundError.for_entity("Photo")

    logger.info("Deleted photo %d from event %d", photo.id, photo.event_id)
    return {"success": True}


@files_router.get("/uploads/{filename}")
def read_upload(
        *,
        storage: Storage = Depends(deps.get_storage),
        upload_store: UploadStore = Depends(deps.get_upload_store),
        filename: str,
) -> Any:
    """
    Serve a stored image by its generated filename.
    """
    photo = storage.get_photo_by_filename(filename)
    if not photo or not upload_store.exists(filename):
        raise NotFoundError.for_entity("File")

    return FileResponse(upload_store.path(filename))
