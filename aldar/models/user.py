from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from aldar.models.enums import UserRole


@dataclass(frozen=True)
class User:
    id: int
    username: str
    password_hash: str  # bcrypt, never serialized
    name: str
    email: str
    created_at: datetime
    role: UserRole = UserRole.user
    phone: Optional[str] = None
