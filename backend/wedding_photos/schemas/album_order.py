import json
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from wedding_photos.models.album_order import OrderStatus
from .base import CamelModel


# Shared properties, also the request body
class AlbumOrderBase(CamelModel):
    customer_name: str = Field(..., min_length=1)
    customer_email: str = Field(..., min_length=1)
    album_type: str = Field(..., min_length=1)
    # JSON text of a list of photo IDs; a plain list is accepted and encoded
    selected_photos: str

    @field_validator("selected_photos", mode="before")
    @classmethod
    def encode_selected_photos(cls, value: Any) -> str:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                raise ValueError("selectedPhotos must be a JSON array of photo ids")
        if not isinstance(value, list) or not all(
            isinstance(photo_id, int) and not isinstance(photo_id, bool) for photo_id in value
        ):
            raise ValueError("selectedPhotos must be a list of photo ids")
        return json.dumps(value)


# Properties to receive on album order creation
class AlbumOrderCreate(AlbumOrderBase):
    event_id: int


# Properties to receive on album order update
class AlbumOrderUpdate(CamelModel):
    status: OrderStatus

    class Config:
        extra = "forbid"


# Properties to return to client
class AlbumOrder(AlbumOrderCreate):
    id: int
    status: OrderStatus
    created_at: datetime
