"""
Storage capability interface.

The API layer only talks to this interface, so the in-memory implementation
can later be swapped for a persistent one without touching the endpoints.
Lookups of unknown ids return ``None`` (or ``False`` for deletes); they never
raise.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from wedding_photos import models, schemas


class Storage(ABC):

    # Events
    @abstractmethod
    def create_event(self, event_in: schemas.EventCreate) -> models.Event: ...

    @abstractmethod
    def get_event(self, event_id: int) -> Optional[models.Event]: ...

    @abstractmethod
    def get_event_by_qr_code(self, qr_code: str) -> Optional[models.Event]: ...

    @abstractmethod
    def list_events(self) -> List[models.Event]:
        """All events, newest first"""

    @abstractmethod
    def update_event(self, event_id: int, event_in: schemas.EventUpdate) -> Optional[models.Event]: ...

    # Photos
    @abstractmethod
    def create_photo(self, photo_in: schemas.PhotoCreate) -> models.Photo: ...

    @abstractmethod
    def get_photo(self, photo_id: int) -> Optional[models.Photo]: ...

    @abstractmethod
    def get_photo_by_filename(self, filename: str) -> Optional[models.Photo]: ...

    @abstractmethod
    def list_photos_by_event(self, event_id: int) -> List[models.Photo]:
        """Photos of one event, most recently uploaded first"""

    @abstractmethod
    def update_photo(self, photo_id: int, photo_in: schemas.PhotoUpdate) -> Optional[models.Photo]: ...

    @abstractmethod
    def delete_photo(self, photo_id: int) -> bool: ...

    # Likes
    @abstractmethod
    def list_likes_by_photo(self, photo_id: int) -> List[models.Like]: ...

    @abstractmethod
    def toggle_like(self, photo_id: int, guest_name: str) -> Optional[models.LikeToggle]:
        """
        Like the photo for this guest, or remove the guest's existing like.

        The photo's ``likes`` counter is updated in the same atomic step.
        Returns ``None`` if the photo does not exist.
        """

    @abstractmethod
    def delete_like(self, photo_id: int, guest_name: str) -> bool: ...

    # Comments
    @abstractmethod
    def create_comment(self, comment_in: schemas.CommentCreate) -> models.Comment: ...

    @abstractmethod
    def list_comments_by_photo(self, photo_id: int) -> List[models.Comment]:
        """Comments on one photo in reading order, oldest first"""

    @abstractmethod
    def delete_comment(self, comment_id: int) -> bool: ...

    # Album orders
    @abstractmethod
    def create_album_order(self, order_in: schemas.AlbumOrderCreate) -> models.AlbumOrder: ...

    @abstractmethod
    def get_album_order(self, order_id: int) -> Optional[models.AlbumOrder]: ...

    @abstractmethod
    def list_album_orders_by_event(self, event_id: int) -> List[models.AlbumOrder]:
        """Orders for one event, newest first"""

    @abstractmethod
    def update_album_order(
            self, order_id: int, order_in: schemas.AlbumOrderUpdate
    ) -> Optional[models.AlbumOrder]: ...

    # Admin
    @abstractmethod
    def compute_stats(self, event_id: int) -> models.EventStats: ...
