from typing import Optional
from datetime import datetime

from .base import CamelModel


# Shared properties
class PhotoBase(CamelModel):
    contributor_name: Optional[str] = None
    caption: Optional[str] = None


# Properties to receive on photo creation
class PhotoCreate(PhotoBase):
    event_id: int
    filename: str
    original_name: str


# Properties to receive on photo update
class PhotoUpdate(PhotoBase):

    class Config:
        extra = "forbid"


# Properties to return to client
class Photo(PhotoBase):
    id: int
    event_id: int
    filename: str
    original_name: str
    likes: int
    uploaded_at: datetime
