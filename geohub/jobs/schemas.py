# geohub/jobs/schemas.py
from datetime import datetime

from geohub.core.schemas import CamelModel
from geohub.users.schemas import UserOut


class JobCreate(CamelModel):
    title: str
    company: str
    location: str
    type: str
    description: str
    requirements: list[str] | None = None
    salary: str | None = None
    contact_email: str
    expires_at: datetime | None = None


class JobOut(JobCreate):
    id: int
    posted_by_id: int
    created_at: datetime


class JobWithPosterOut(JobOut):
    posted_by: UserOut
