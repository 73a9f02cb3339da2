# geohub/users/service.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.security import hash_password, create_access_token, verify_password
from geohub.users.models import User
from geohub.users.repository import (
    get_user_by_username,
    get_user_by_email,
    create_user,
    update_user,
)
from geohub.users.schemas import UserCreate, UserUpdate


def issue_token(user: User) -> str:
    return create_access_token(user.id, user.username)


async def register_user(db: AsyncSession, data: UserCreate) -> tuple[User, str]:
    if await get_user_by_email(db, data.email):
        raise ValueError("User already exists")
    if await get_user_by_username(db, data.username):
        raise ValueError("Username already taken")

    values = data.model_dump()
    values["password"] = hash_password(data.password)
    user = await create_user(db, values)

    # the router commits
    return user, issue_token(user)


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User | None:
    user = await get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password):
        return None
    return user


async def login_user(db: AsyncSession, email: str, password: str) -> tuple[User, str]:
    user = await authenticate_user(db, email, password)
    if not user:
        raise ValueError("Invalid credentials")
    return user, issue_token(user)


async def update_profile(db: AsyncSession, user_id: int, data: UserUpdate) -> User | None:
    """
    Applies only the fields the client sent. A new password is hashed;
    username/email must stay unique.
    """
    values = data.model_dump(exclude_unset=True)

    for key in ("username", "email", "password", "full_name"):
        # required columns cannot be cleared
        if key in values and values[key] is None:
            values.pop(key)

    if "email" in values:
        other = await get_user_by_email(db, values["email"])
        if other and other.id != user_id:
            raise ValueError("Email already in use")
    if "username" in values:
        other = await get_user_by_username(db, values["username"])
        if other and other.id != user_id:
            raise ValueError("Username already taken")
    if "password" in values:
        values["password"] = hash_password(values["password"])

    return await update_user(db, user_id, values)
