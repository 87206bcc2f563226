"""User schema definitions.

This module defines the User data model and the request bodies of the
authentication and user management endpoints.
"""

from datetime import datetime
from typing import Literal, Optional

import pytz
from pydantic import BaseModel, Field, field_validator

UserRole = Literal["Level 1", "Level 2", "Level 3"]


def clean_username(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and reject names that are left empty."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("Username cannot be blank.")
    return value


class PublicUser(BaseModel):
    """A user as returned by the API. The password is never included."""

    id: str
    username: str
    role: UserRole
    createdAt: str


class User(PublicUser):
    """A stored user, including the plaintext password."""

    password: Optional[str] = None
    createdAt: str = Field(
        description="The time when the user was created.",
        default_factory=lambda: datetime.now(pytz.utc).isoformat(),
    )


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class CreateUserRequest(BaseModel):
    username: str = Field(min_length=1, description="Login name; surrounding whitespace is dropped.")
    password: str = Field(min_length=1)
    role: UserRole = "Level 1"

    @field_validator("username")
    @classmethod
    def strip_username(cls, value):
        return clean_username(value)


class UpdateUserRequest(BaseModel):
    """Partial user update. Omitted fields keep their stored values.

    An empty password means "leave the password unchanged".
    """

    username: Optional[str] = Field(default=None, min_length=1)
    role: Optional[UserRole] = None
    password: Optional[str] = None

    @field_validator("username")
    @classmethod
    def strip_username(cls, value):
        return clean_username(value)
