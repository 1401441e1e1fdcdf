import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from wedding_photos import schemas
from wedding_photos.api import deps
from wedding_photos.config import Settings
from wedding_photos.core.errors import NotFoundError
from wedding_photos.core.qr import make_event_url, render_qr_data_url, render_qr_png
from wedding_photos.db.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas.EventCreated)
def create_event(
        *,
        storage: Storage = Depends(deps.get_storage),
        settings: Settings = Depends(deps.get_settings),
        event_in: schemas.EventCreate,
) -> Any:
    """
    Create new event, with the QR code guests scan to reach it.
    """
    event = storage.create_event(event_in)
    qr_code_data_url = render_qr_data_url(make_event_url(event.qr_code, settings))

    logger.info("Created event %d for %s", event.id, event.couple_name)
    return schemas.EventCreated(
        **schemas.Event.model_validate(event).model_dump(),
        qr_code_data_url=qr_code_data_url,
    )


@router.get("", response_model=List[schemas.Event])
def read_events(
        storage: Storage = Depends(deps.get_storage),
) -> Any:
    """
    Retrieve events, newest first.
    """
    return storage.list_events()


@router.get("/qr/{qr_code}", response_model=schemas.Event)
def read_event_by_qr_code(
        *,
        storage: Storage = Depends(deps.get_storage),
        qr_code: str,
) -> Any:
    """
    Get event by the code embedded in its QR code.
    """
    event = storage.get_event_by_qr_code(qr_code)
    if not event:
        raise NotFoundError.for_entity("Event")
    return event


@router.get("/{event_id}", response_model=schemas.Event)
def read_event(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
) -> Any:
    """
    Get event by ID.
    """
    event = storage.get_event(event_id)
    if not event:
        raise NotFoundError.for_entity("Event")
    return event


@router.patch("/{event_id}", response_model=schemas.Event)
def update_event(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
        event_in: schemas.EventUpdate,
) -> Any:
    """
    Activate or deactivate an event.
    """
    event = storage.update_event(event_id, event_in)
    if not event:
        raise NotFoundError.for_entity("Event")
    return event


@router.get("/{event_id}/qr.png")
def read_event_qr_image(
        *,
        storage: Storage = Depends(deps.get_storage),
        settings: Settings = Depends(deps.get_settings),
        event_id: int,
) -> Any:
    """
    Render the event's QR code as a PNG, for printing on table cards.
    """
    event = storage.get_event(event_id)
    if not event:
        raise NotFoundError.for_entity("Event")
    return Response(
        content=render_qr_png(make_event_url(event.qr_code, settings)),
        media_type="image/png",
    )


@router.get("/{event_id}/stats", response_model=schemas.EventStats)
def read_event_stats(
        *,
        storage: Storage = Depends(deps.get_storage),
        event_id: int,
) -> Any:
    """
    Aggregate counts for the admin dashboard.
    """
    return storage.compute_stats(event_id)
