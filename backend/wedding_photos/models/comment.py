from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    id: int
    photo_id: int
    guest_name: str
    content: str
    created_at: datetime
