# geohub/resources/repository.py
from typing import Any

from sqlalchemy import select, desc, delete, update, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.resources.models import Resource
from geohub.users.models import User


async def get_resources(
    db: AsyncSession,
    category: str | None = None,
    *,
    search: str | None = None,
):
    """Library listing, newest first. Returns rows (Resource, User)."""
    q = (
        select(Resource, User)
        .join(User, User.id == Resource.uploaded_by_id)
        .order_by(desc(Resource.created_at), desc(Resource.id))
    )
    if category:
        q = q.where(Resource.category == category)
    if search:
        pattern = f"%{search.lower()}%"
        q = q.where(
            or_(
                func.lower(Resource.title).like(pattern),
                func.lower(Resource.description).like(pattern),
            )
        )
    res = await db.execute(q)
    return res.all()


async def get_resource(db: AsyncSession, resource_id: int):
    """Row (Resource, User) or None."""
    q = (
        select(Resource, User)
        .join(User, User.id == Resource.uploaded_by_id)
        .where(Resource.id == resource_id)
    )
    res = await db.execute(q)
    return res.one_or_none()


async def create_resource(db: AsyncSession, data: dict[str, Any]) -> Resource:
    resource = Resource(**data)
    db.add(resource)
    await db.flush()
    await db.refresh(resource)
    return resource


async def increment_download_count(db: AsyncSession, resource_id: int) -> int:
    """
    Single UPDATE ... SET download_count = download_count + 1.
    Returns the number of rows touched (0 when the id does not exist).
    """
    res = await db.execute(
        update(Resource)
        .where(Resource.id == resource_id)
        .values(download_count=Resource.download_count + 1)
    )
    return res.rowcount


async def delete_resource(db: AsyncSession, resource_id: int) -> None:
    # missing id: no-op
    await db.execute(delete(Resource).where(Resource.id == resource_id))
