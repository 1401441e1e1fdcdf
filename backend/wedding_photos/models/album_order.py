import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class AlbumOrder:
    id: int
    event_id: int
    customer_name: str
    customer_email: str
    album_type: str
    selected_photos: str  # JSON array of photo IDs
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING

    @property
    def selected_photo_ids(self) -> List[int]:
        return json.loads(self.selected_photos)
