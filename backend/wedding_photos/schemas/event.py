from datetime import datetime

from pydantic import Field

from .base import CamelModel


# Shared properties
class EventBase(CamelModel):
    couple_name: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    venue: str = Field(..., min_length=1)


# Properties to receive on event creation
class EventCreate(EventBase):
    pass


# Properties to receive on event update
class EventUpdate(CamelModel):
    # Explicit null is rejected, the flag is either given or left alone
    is_active: bool = None

    class Config:
        extra = "forbid"


# Properties to return to client
class Event(EventBase):
    id: int
    qr_code: str
    is_active: bool
    created_at: datetime


# Returned once, on creation, with the rendered QR code inlined
class EventCreated(Event):
    qr_code_data_url: str
