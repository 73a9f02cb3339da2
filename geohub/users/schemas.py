# geohub/users/schemas.py
from datetime import datetime

from pydantic import EmailStr, Field

from geohub.core.schemas import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=255)
    bio: str | None = None
    field_experience: str | None = None
    skills: list[str] | None = None
    education: str | None = None
    location: str | None = None
    availability: str | None = None
    profile_picture: str | None = None


class UserUpdate(CamelModel):
    """Profile edit: every field optional, only the ones sent are touched."""

    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=128)
    full_name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = None
    field_experience: str | None = None
    skills: list[str] | None = None
    education: str | None = None
    location: str | None = None
    availability: str | None = None
    profile_picture: str | None = None


class LoginIn(CamelModel):
    # normalized like UserCreate.email so lookups match the stored form
    email: EmailStr
    password: str


class UserOut(CamelModel):
    id: int
    username: str
    email: str
    full_name: str
    bio: str | None = None
    field_experience: str | None = None
    skills: list[str] | None = None
    education: str | None = None
    location: str | None = None
    availability: str | None = None
    profile_picture: str | None = None
    created_at: datetime


class AuthOut(CamelModel):
    user: UserOut
    token: str
