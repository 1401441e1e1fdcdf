from typing import Any, List

from fastapi import APIRouter, Depends

from wedding_photos import schemas
from wedding_photos.api import deps
from wedding_photos.core.errors import NotFoundError
from wedding_photos.db.storage import Storage

router = APIRouter()


@router.post("/photos/{photo_id}/comments", response_model=schemas.Comment)
def create_comment(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
        comment_in: schemas.CommentBase,
) -> Any:
    """
    Add a comment to a photo.
    """
    return storage.create_comment(
        schemas.CommentCreate(**comment_in.model_dump(), photo_id=photo_id)
    )


@router.get("/photos/{photo_id}/comments", response_model=List[schemas.Comment])
def read_comments(
        *,
        storage: Storage = Depends(deps.get_storage),
        photo_id: int,
) -> Any:
    """
    Retrieve a photo's comments in the order they were written.
    """
    return storage.list_comments_by_photo(photo_id)


@router.delete("/comments/{comment_id}")
def delete_comment(
        *,
        storage: Storage = Depends(deps.get_storage),
        comment_id: int,
) -> Any:
    if not storage.delete_comment(comment_id):
        raise NotFoundError.for_entity("Comment")
    return {"success": True}
