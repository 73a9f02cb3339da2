# geohub/messages/router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import get_current_identity, require_capability
from geohub.core.permissions import Capability
from geohub.core.schemas import RecordId
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.messages import repository as repo
from geohub.messages.schemas import MessageCreate, MessageOut, MessageWithUsersOut
from geohub.users.schemas import UserOut

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.get("", response_model=List[MessageWithUsersOut])
async def inbox(
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    rows = await repo.get_messages(db, identity.user_id)
    return [
        MessageWithUsersOut(
            **MessageOut.model_validate(msg).model_dump(),
            sender=UserOut.model_validate(sender),
            receiver=UserOut.model_validate(receiver),
        )
        for msg, sender, receiver in rows
    ]


@router.post("", response_model=MessageOut)
async def send_message(
    payload: MessageCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.SEND_MESSAGE)),
    db: AsyncSession = Depends(get_session),
):
    try:
        msg = await repo.create_message(
            db,
            {**payload.model_dump(), "sender_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        # unknown receiver
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return msg


@router.put("/{message_id}/read")
async def mark_read(
    message_id: RecordId,
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    msg = await repo.get_message(db, message_id)
    if not msg:
        raise HTTPException(status_code=404, detail="Message not found")
    if msg.receiver_id != identity.user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your message")

    await repo.mark_message_as_read(db, message_id)
    await db.commit()
    return {"message": "Message marked as read"}
