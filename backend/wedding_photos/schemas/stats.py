from .base import CamelModel


class EventStats(CamelModel):
    total_photos: int
    total_likes: int
    contributors: int
    album_orders: int
