from datetime import datetime
from typing import Optional

from pydantic import Field

from aldar.schemas.common import CamelModel


class ContactMessageCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: Optional[str] = None
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    created_at: datetime
    is_read: bool
