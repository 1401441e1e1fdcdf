from dataclasses import dataclass


@dataclass(frozen=True)
class EventStats:
    total_photos: int
    total_likes: int
    contributors: int
    album_orders: int
