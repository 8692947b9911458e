from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ContactMessage:
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    phone: Optional[str] = None
    is_read: bool = False
