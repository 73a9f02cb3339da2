# geohub/messages/schemas.py
from datetime import datetime

from pydantic import Field

from geohub.core.schemas import MAX_ID, CamelModel
from geohub.users.schemas import UserOut


class MessageCreate(CamelModel):
    # sender comes from the token
    receiver_id: int = Field(..., le=MAX_ID)
    subject: str
    content: str


class MessageOut(MessageCreate):
    id: int
    sender_id: int
    is_read: bool = False
    created_at: datetime


class MessageWithUsersOut(MessageOut):
    sender: UserOut
    receiver: UserOut
