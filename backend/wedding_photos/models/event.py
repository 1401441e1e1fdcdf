from dataclasses import dataclass
from datetime import datetime


@dataclass
class Event:
    """
    One wedding or gathering; root of the data hierarchy.

    ``qr_code`` is generated by storage on creation and never changes.
    """
    id: int
    couple_name: str
    date: str
    venue: str
    qr_code: str
    created_at: datetime
    is_active: bool = True
