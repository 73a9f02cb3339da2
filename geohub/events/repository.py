# geohub/events/repository.py
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.config import settings
from geohub.events.models import Event, EventRegistration
from geohub.users.models import User


async def get_events(db: AsyncSession, limit: int | None = None):
    """Upcoming-first calendar (event date ascending). Rows (Event, User)."""
    q = (
        select(Event, User)
        .join(User, User.id == Event.organizer_id)
        .order_by(Event.date.asc(), Event.id.asc())
        .limit(limit or settings.DEFAULT_LIST_LIMIT)
    )
    res = await db.execute(q)
    return res.all()


async def get_event(db: AsyncSession, event_id: int):
    """Row (Event, User) or None."""
    q = (
        select(Event, User)
        .join(User, User.id == Event.organizer_id)
        .where(Event.id == event_id)
    )
    res = await db.execute(q)
    return res.one_or_none()


async def create_event(db: AsyncSession, data: dict[str, Any]) -> Event:
    ev = Event(**data)
    db.add(ev)
    await db.flush()
    await db.refresh(ev)
    return ev


# ------------------ REGISTRATIONS ------------------


async def register_for_event(
    db: AsyncSession,
    event_id: int,
    user_id: int,
) -> EventRegistration:
    """
    Inserts the registration and bumps events.registration_count in the
    same transaction. The counter is incremented in SQL, not in Python.

    A second registration for the same (event, user) violates
    uq_event_registration_event_user and raises IntegrityError on flush,
    before the counter is touched. The caller commits or rolls back.
    """
    registration = EventRegistration(event_id=event_id, user_id=user_id)
    db.add(registration)
    await db.flush()

    await db.execute(
        update(Event)
        .where(Event.id == event_id)
        .values(registration_count=Event.registration_count + 1)
    )
    await db.refresh(registration)
    return registration


async def is_user_registered_for_event(
    db: AsyncSession,
    event_id: int,
    user_id: int,
) -> bool:
    q = select(EventRegistration.id).where(
        EventRegistration.event_id == event_id,
        EventRegistration.user_id == user_id,
    )
    res = await db.execute(q)
    return res.first() is not None
