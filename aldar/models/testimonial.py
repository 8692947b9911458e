from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Testimonial:
    id: int
    name: str
    location: str
    message: str
    rating: int  # 1..5
    created_at: datetime
    is_approved: bool = False
