# geohub/resources/schemas.py
from datetime import datetime

from geohub.core.schemas import CamelModel
from geohub.users.schemas import UserOut


class ResourceCreate(CamelModel):
    title: str
    description: str | None = None
    category: str
    file_url: str | None = None
    file_name: str | None = None
    file_size: str | None = None


class ResourceOut(ResourceCreate):
    id: int
    uploaded_by_id: int
    download_count: int = 0
    created_at: datetime


class ResourceWithUploaderOut(ResourceOut):
    uploaded_by: UserOut
