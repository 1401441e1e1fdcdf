from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Photo:
    id: int
    event_id: int
    filename: str  # Name of the stored blob in the upload folder
    original_name: str
    uploaded_at: datetime
    contributor_name: Optional[str] = None
    caption: Optional[str] = None
    # Denormalised count of Like records for this photo, kept in step by toggle_like
    likes: int = 0
