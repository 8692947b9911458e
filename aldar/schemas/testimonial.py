from datetime import datetime

from pydantic import Field, field_validator

from aldar.core import messages
from aldar.schemas.common import CamelModel


class TestimonialCreate(CamelModel):
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    rating: int

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, value):
        if not 1 <= value <= 5:
            raise ValueError(messages.RATING_OUT_OF_RANGE)
        return value


class TestimonialResponse(CamelModel):
    id: int
    name: str
    location: str
    message: str
    rating: int
    created_at: datetime
    is_approved: bool
