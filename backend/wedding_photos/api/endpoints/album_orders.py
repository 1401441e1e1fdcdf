from typing import Any, List

from fastapi import APIRouter, Depends

from wedding_photos import schemas
from wedding_photos.api import deps
from wedding_photos.core.errors import NotFoundError
from wedding_photos.db.storage import Storage

router = APIRouter()


@router.post("/events/{event_id}/album-orders", response_model=schemas.AlbumOrder)
def create_album_order(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
        order_in: schemas.AlbumOrderBase,
) -> Any:
    """
    Order a printed album of selected photos. New orders start as pending.
    """
    return storage.create_album_order(
        schemas.AlbumOrderCreate(**order_in.model_dump(), event_id=event_id)
    )


@router.get("/events/{event_id}/album-orders", response_model=List[schemas.AlbumOrder])
def read_album_orders(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
) -> Any:
    """
    Retrieve an event's album orders, newest first.
    """
    return storage.list_album_orders_by_event(event_id)


@router.patch("/album-orders/{order_id}", response_model=schemas.AlbumOrder)
def update_album_order(
        *,
        storage: Storage = Depends(deps.get_storage),
        order_id: int,
        order_in: schemas.AlbumOrderUpdate,
) -> Any:
    """
    Move an album order to another status. Any transition is allowed.
    """
    order = storage.update_album_order(order_id, order_in)
    if not order:
        raise NotFoundError.for_entity("Album order")
    return order
