# geohub/messages/repository.py
from typing import Any

from sqlalchemy import select, desc, update
from sqlalchemy.orm import aliased
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.messages.models import Message
from geohub.users.models import User


async def get_messages(db: AsyncSession, user_id: int):
    """
    Inbox: messages addressed to `user_id`, newest first.
    Rows (Message, sender User, receiver User).
    """
    Sender = aliased(User, name="sender")
    Receiver = aliased(User, name="receiver")
    q = (
        select(Message, Sender, Receiver)
        .join(Sender, Sender.id == Message.sender_id)
        .join(Receiver, Receiver.id == Message.receiver_id)
        .where(Message.receiver_id == user_id)
        .order_by(desc(Message.created_at), desc(Message.id))
    )
    res = await db.execute(q)
    return res.all()


async def get_message(db: AsyncSession, message_id: int) -> Message | None:
    res = await db.execute(select(Message).where(Message.id == message_id))
    return res.scalar_one_or_none()


async def create_message(db: AsyncSession, data: dict[str, Any]) -> Message:
    msg = Message(**data)
    db.add(msg)
    await db.flush()
    await db.refresh(msg)
    return msg


async def mark_message_as_read(db: AsyncSession, message_id: int) -> None:
    await db.execute(
        update(Message).where(Message.id == message_id).values(is_read=True)
    )
