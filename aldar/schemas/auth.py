from typing import Optional

from pydantic import BaseModel, field_validator

from aldar.core import messages
from aldar.models import UserRole
from aldar.schemas.common import CamelModel


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_length(cls, value):
        if len(value) < 3:
            raise ValueError(messages.USERNAME_TOO_SHORT)
        return value

    @field_validator("password")
    @classmethod
    def password_length(cls, value):
        if len(value) < 6:
            raise ValueError(messages.PASSWORD_TOO_SHORT)
        return value


class UserResponse(CamelModel):
    """Public user fields; the password hash is never part of a response."""

    id: int
    username: str
    name: str
    role: UserRole
    email: str


class UserProfileResponse(UserResponse):
    phone: Optional[str] = None
