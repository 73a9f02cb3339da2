# geohub/events/schemas.py
from datetime import datetime

from pydantic import Field

from geohub.core.schemas import MAX_ID, CamelModel
from geohub.users.schemas import UserOut


class EventCreate(CamelModel):
    title: str
    description: str
    location: str
    date: datetime
    image_url: str | None = None
    max_attendees: int | None = Field(default=None, le=MAX_ID)


class EventOut(EventCreate):
    id: int
    registration_count: int = 0
    organizer_id: int
    created_at: datetime


class EventWithOrganizerOut(EventOut):
    organizer: UserOut


class EventRegistrationOut(CamelModel):
    id: int
    event_id: int
    user_id: int
    created_at: datetime


class RegistrationStatusOut(CamelModel):
    registered: bool
