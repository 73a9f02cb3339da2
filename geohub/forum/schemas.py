# geohub/forum/schemas.py
from datetime import datetime

from pydantic import Field

from geohub.core.schemas import MAX_ID, CamelModel
from geohub.users.schemas import UserOut


class ForumCategoryCreate(CamelModel):
    name: str
    description: str
    icon: str
    color: str


class ForumCategoryOut(ForumCategoryCreate):
    id: int
    created_at: datetime


class ForumPostCreate(CamelModel):
    # author comes from the token
    title: str
    content: str
    category_id: int = Field(..., le=MAX_ID)


class ForumPostOut(CamelModel):
    id: int
    title: str
    content: str
    author_id: int
    category_id: int
    created_at: datetime
    updated_at: datetime


class ForumPostDetailOut(ForumPostOut):
    author: UserOut
    category: ForumCategoryOut


class ForumPostListItemOut(ForumPostDetailOut):
    reply_count: int = 0


class ForumReplyCreate(CamelModel):
    content: str


class ForumReplyOut(CamelModel):
    id: int
    content: str
    author_id: int
    post_id: int
    created_at: datetime


class ForumReplyWithAuthorOut(ForumReplyOut):
    author: UserOut
