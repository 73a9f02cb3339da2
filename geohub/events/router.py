# geohub/events/router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import get_current_identity, require_capability
from geohub.core.config import settings
from geohub.core.permissions import Capability
from geohub.core.schemas import RecordId
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.events import repository as repo
from geohub.events.models import Event
from geohub.events.schemas import (
    EventCreate,
    EventOut,
    EventRegistrationOut,
    EventWithOrganizerOut,
    RegistrationStatusOut,
)
from geohub.users.models import User
from geohub.users.schemas import UserOut

router = APIRouter(prefix="/api/events", tags=["events"])


def _event_out(ev: Event, organizer: User) -> EventWithOrganizerOut:
    return EventWithOrganizerOut(
        **EventOut.model_validate(ev).model_dump(),
        organizer=UserOut.model_validate(organizer),
    )


@router.get("", response_model=List[EventWithOrganizerOut])
async def list_events(
    limit: int | None = Query(None, ge=1, le=settings.MAX_LIST_LIMIT),
    db: AsyncSession = Depends(get_session),
):
    rows = await repo.get_events(db, limit)
    return [_event_out(ev, organizer) for ev, organizer in rows]


@router.get("/{event_id}", response_model=EventWithOrganizerOut)
async def get_event(event_id: RecordId, db: AsyncSession = Depends(get_session)):
    row = await repo.get_event(db, event_id)
    if not row:
        raise HTTPException(status_code=404, detail="Event not found")
    ev, organizer = row
    return _event_out(ev, organizer)


@router.post("", response_model=EventOut)
async def create_event(
    payload: EventCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.CREATE_EVENT)),
    db: AsyncSession = Depends(get_session),
):
    try:
        ev = await repo.create_event(
            db,
            {**payload.model_dump(), "organizer_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return ev


@router.post("/{event_id}/register", response_model=EventRegistrationOut)
async def register(
    event_id: RecordId,
    identity: TokenIdentity = Depends(require_capability(Capability.REGISTER_EVENT)),
    db: AsyncSession = Depends(get_session),
):
    if not await repo.get_event(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        registration = await repo.register_for_event(db, event_id, identity.user_id)
        await db.commit()
    except IntegrityError:
        # uq_event_registration_event_user: nothing was written
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Already registered for this event",
        )
    return registration


@router.get("/{event_id}/registration", response_model=RegistrationStatusOut)
async def registration_status(
    event_id: RecordId,
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    registered = await repo.is_user_registered_for_event(db, event_id, identity.user_id)
    return RegistrationStatusOut(registered=registered)
