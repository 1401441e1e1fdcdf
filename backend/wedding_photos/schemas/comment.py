from datetime import datetime

from pydantic import Field

from .base import CamelModel


# Shared properties, also the request body
class CommentBase(CamelModel):
    guest_name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


# Properties to receive on comment creation
class CommentCreate(CommentBase):
    photo_id: int


# Properties to return to client
class Comment(CommentCreate):
    id: int
    created_at: datetime
