# geohub/users/repository.py
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from geohub.users.models import User


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    res = await db.execute(select(User).where(User.username == username))
    return res.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalar_one_or_none()


async def create_user(db: AsyncSession, data: dict[str, Any]) -> User:
    """`data["password"]` must already be hashed. Caller commits."""
    user = User(**data)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def update_user(db: AsyncSession, user_id: int, data: dict[str, Any]) -> User | None:
    user = await get_user(db, user_id)
    if not user:
        return None
    for field, value in data.items():
        setattr(user, field, value)
    await db.flush()
    await db.refresh(user)
    return user
