from datetime import datetime

from pydantic import Field

from .base import CamelModel


class LikeRequest(CamelModel):
    guest_name: str = Field(..., min_length=1)


class Like(CamelModel):
    id: int
    photo_id: int
    guest_name: str
    created_at: datetime


class LikeToggle(CamelModel):
    liked: bool
    count: int
