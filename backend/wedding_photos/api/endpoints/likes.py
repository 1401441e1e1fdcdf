from typing import Any, List

from fastapi import APIRouter, Depends

from wedding_photos import schemas
from wedding_photos.api import deps
from wedding_photos.core.errors import NotFoundError
from wedding_photos.db.storage import Storage

router = APIRouter()


@router.get("/{photo_id}/likes", response_model=List[schemas.Like])
def read_likes(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
) -> Any:
    """
    Retrieve the likes on a photo.
    """
    return storage.list_likes_by_photo(photo_id)


@router.post("/{photo_id}/likes", response_model=schemas.LikeToggle)
def toggle_like(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
        like_in: schemas.LikeRequest,
) -> Any:
    """
    Like a photo, or take the like back if this guest already liked it.
    """
    result = storage.toggle_like(photo_id, like_in.guest_name)
    if result is None:
        raise NotFoundError.for_entity("Photo")
    return result
