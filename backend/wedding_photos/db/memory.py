"""
In-memory implementation of the storage interface.

Each entity type lives in its own dict keyed by id, with its own id counter
(starting at 1, never reused) and its own lock. Operations that touch more
than one map take the locks in a fixed order: events, photos, likes,
comments, album orders.

Records are copied on the way in and out, so nothing outside this module
can mutate stored state.
"""
import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from typing import Callable, Dict, List, Optional

from wedding_photos import models, schemas
from wedding_photos.db.storage import Storage

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Blank or whitespace-only text is stored as no value at all"""
    if value is None:
        return None
    return value.strip() or None


class MemoryStorage(Storage):

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock

        self._events: Dict[int, models.Event] = {}
        self._photos: Dict[int, models.Photo] = {}
        self._likes: Dict[int, models.Like] = {}
        self._comments: Dict[int, models.Comment] = {}
        self._album_orders: Dict[int, models.AlbumOrder] = {}

        self._event_ids = count(1)
        self._photo_ids = count(1)
        self._like_ids = count(1)
        self._comment_ids = count(1)
        self._album_order_ids = count(1)

        self._events_lock = threading.RLock()
        self._photos_lock = threading.RLock()
        self._likes_lock = threading.RLock()
        self._comments_lock = threading.RLock()
        self._album_orders_lock = threading.RLock()

    # Events

    def create_event(self, event_in: schemas.EventCreate) -> models.Event:
        with self._events_lock:
            event_id = next(self._event_ids)
            now = self._clock()
            event = models.Event(
                id=event_id,
                couple_name=event_in.couple_name,
                date=event_in.date,
                venue=event_in.venue,
                # The id makes it unique, the timestamp makes it hard to guess
                qr_code=f"event-{event_id}-{int(now.timestamp() * 1000)}",
                is_active=True,
                created_at=now,
            )
            self._events[event_id] = event
        logger.debug("Created event %d with qr code %s", event.id, event.qr_code)
        return replace(event)

    def get_event(self, event_id: int) -> Optional[models.Event]:
        with self._events_lock:
            event = self._events.get(event_id)
            return replace(event) if event else None

    def get_event_by_qr_code(self, qr_code: str) -> Optional[models.Event]:
        with self._events_lock:
            for event in self._events.values():
                if event.qr_code == qr_code:
                    return replace(event)
        return None

    def list_events(self) -> List[models.Event]:
        with self._events_lock:
            events = [replace(event) for event in self._events.values()]
        return sorted(events, key=lambda e: (e.created_at, e.id), reverse=True)

    def update_event(self, event_id: int, event_in: schemas.EventUpdate) -> Optional[models.Event]:
        with self._events_lock:
            event = self._events.get(event_id)
            if not event:
                return None
            event = replace(event, **event_in.model_dump(exclude_unset=True))
            self._events[event_id] = event
            return replace(event)

    # Photos

    def create_photo(self, photo_in: schemas.PhotoCreate) -> models.Photo:
        with self._photos_lock:
            photo_id = next(self._photo_ids)
            photo = models.Photo(
                id=photo_id,
                event_id=photo_in.event_id,
                filename=photo_in.filename,
                original_name=photo_in.original_name,
                contributor_name=blank_to_none(photo_in.contributor_name),
                caption=blank_to_none(photo_in.caption),
                likes=0,
                uploaded_at=self._clock(),
            )
            self._photos[photo_id] = photo
        logger.debug("Created photo %d for event %d", photo.id, photo.event_id)
        return replace(photo)

    def get_photo(self, photo_id: int) -> Optional[models.Photo]:
        with self._photos_lock:
            photo = self._photos.get(photo_id)
            return replace(photo) if photo else None

    def get_photo_by_filename(self, filename: str) -> Optional[models.Photo]:
        with self._photos_lock:
            for photo in self._photos.values():
                if photo.filename == filename:
                    return replace(photo)
        return None

    def list_photos_by_event(self, event_id: int) -> List[models.Photo]:
        with self._photos_lock:
            photos = [replace(p) for p in self._photos.values() if p.event_id == event_id]
        return sorted(photos, key=lambda p: (p.uploaded_at, p.id), reverse=True)

    def update_photo(self, photo_id: int, photo_in: schemas.PhotoUpdate) -> Optional[models.Photo]:
        with self._photos_lock:
            photo = self._photos.get(photo_id)
            if not photo:
                return None
            changes = {
                field: blank_to_none(value)
                for field, value in photo_in.model_dump(exclude_unset=True).items()
            }
            photo = replace(photo, **changes)
            self._photos[photo_id] = photo
            return replace(photo)

    def delete_photo(self, photo_id: int) -> bool:
        with self._photos_lock:
            deleted = self._photos.pop(photo_id, None) is not None
        if deleted:
            logger.debug("Deleted photo %d", photo_id)
        return deleted

    # Likes

    def _find_like(self, photo_id: int, guest_name: str) -> Optional[models.Like]:
        for like in self._likes.values():
            if like.photo_id == photo_id and like.guest_name == guest_name:
                return like
        return None

    def _count_likes(self, photo_id: int) -> int:
        return sum(1 for like in self._likes.values() if like.photo_id == photo_id)

    def _sync_like_count(self, photo_id: int) -> int:
        # Caller holds both the photos and the likes lock
        like_count = self._count_likes(photo_id)
        photo = self._photos.get(photo_id)
        if photo:
            self._photos[photo_id] = replace(photo, likes=like_count)
        return like_count

    def list_likes_by_photo(self, photo_id: int) -> List[models.Like]:
        with self._likes_lock:
            return [replace(like) for like in self._likes.values() if like.photo_id == photo_id]

    def toggle_like(self, photo_id: int, guest_name: str) -> Optional[models.LikeToggle]:
        with self._photos_lock, self._likes_lock:
            if photo_id not in self._photos:
                return None

            existing = self._find_like(photo_id, guest_name)
            if existing:
                del self._likes[existing.id]
                liked = False
            else:
                like_id = next(self._like_ids)
                self._likes[like_id] = models.Like(
                    id=like_id,
                    photo_id=photo_id,
                    guest_name=guest_name,
                    created_at=self._clock(),
                )
                liked = True

            like_count = self._sync_like_count(photo_id)

        logger.debug("Guest %r %s photo %d (%d likes)",
                     guest_name, "liked" if liked else "unliked", photo_id, like_count)
        return models.LikeToggle(liked=liked, count=like_count)

    def delete_like(self, photo_id: int, guest_name: str) -> bool:
        with self._photos_lock, self._likes_lock:
            like = self._find_like(photo_id, guest_name)
            if not like:
                return False
            del self._likes[like.id]
            self._sync_like_count(photo_id)
        return True

    # Comments

    def create_comment(self, comment_in: schemas.CommentCreate) -> models.Comment:
        with self._comments_lock:
            comment_id = next(self._comment_ids)
            comment = models.Comment(
                id=comment_id,
                photo_id=comment_in.photo_id,
                guest_name=comment_in.guest_name,
                content=comment_in.content,
                created_at=self._clock(),
            )
            self._comments[comment_id] = comment
        return replace(comment)

    def list_comments_by_photo(self, photo_id: int) -> List[models.Comment]:
        with self._comments_lock:
            comments = [replace(c) for c in self._comments.values() if c.photo_id == photo_id]
        # Oldest first, unlike every other listing
        return sorted(comments, key=lambda c: (c.created_at, c.id))

    def delete_comment(self, comment_id: int) -> bool:
        with self._comments_lock:
            return self._comments.pop(comment_id, None) is not None

    # Album orders

    def create_album_order(self, order_in: schemas.AlbumOrderCreate) -> models.AlbumOrder:
        with self._album_orders_lock:
            order_id = next(self._album_order_ids)
            order = models.AlbumOrder(
                id=order_id,
                event_id=order_in.event_id,
                customer_name=order_in.customer_name,
                customer_email=order_in.customer_email,
                album_type=order_in.album_type,
                selected_photos=order_in.selected_photos,
                status=models.OrderStatus.PENDING,
                created_at=self._clock(),
            )
            self._album_orders[order_id] = order
        logger.debug("Created album order %d for event %d", order.id, order.event_id)
        return replace(order)

    def get_album_order(self, order_id: int) -> Optional[models.AlbumOrder]:
        with self._album_orders_lock:
            order = self._album_orders.get(order_id)
            return replace(order) if order else None

    def list_album_orders_by_event(self, event_id: int) -> List[models.AlbumOrder]:
        with self._album_orders_lock:
            orders = [replace(o) for o in self._album_orders.values() if o.event_id == event_id]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def update_album_order(
            self, order_id: int, order_in: schemas.AlbumOrderUpdate
    ) -> Optional[models.AlbumOrder]:
        with self._album_orders_lock:
            order = self._album_orders.get(order_id)
            if not order:
                return None
            order = replace(order, **order_in.model_dump(exclude_unset=True))
            self._album_orders[order_id] = order
            return replace(order)

    # Admin

    def compute_stats(self, event_id: int) -> models.EventStats:
        """
        Aggregate counts for the admin dashboard.

        ``total_likes`` sums the photos' stored ``likes`` counters instead of
        recounting Like records; the two only agree as long as every like
        change goes through ``toggle_like``/``delete_like``.
        """
        with self._photos_lock, self._album_orders_lock:
            photos = [p for p in self._photos.values() if p.event_id == event_id]
            album_orders = sum(1 for o in self._album_orders.values() if o.event_id == event_id)

        return models.EventStats(
            total_photos=len(photos),
            total_likes=sum(photo.likes for photo in photos),
            contributors=len({p.contributor_name for p in photos if p.contributor_name}),
            album_orders=album_orders,
        )
