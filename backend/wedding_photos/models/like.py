from dataclasses import dataclass
from datetime import datetime


@dataclass
class Like:
    id: int
    photo_id: int
    guest_name: str
    created_at: datetime


@dataclass(frozen=True)
class LikeToggle:
    """Outcome of a like toggle: whether the guest now likes the photo, and the new count"""
    liked: bool
    count: int
