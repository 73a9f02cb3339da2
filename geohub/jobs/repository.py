# geohub/jobs/repository.py
from typing import Any

from sqlalchemy import select, desc, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.config import settings
from geohub.jobs.models import Job
from geohub.users.models import User


async def get_jobs(
    db: AsyncSession,
    limit: int | None = None,
    *,
    search: str | None = None,
    job_type: str | None = None,
    location: str | None = None,
):
    """
    Job board, newest first. Returns rows (Job, User).
    `search` matches title, company or description (case-insensitive).
    """
    q = (
        select(Job, User)
        .join(User, User.id == Job.posted_by_id)
        .order_by(desc(Job.created_at), desc(Job.id))
        .limit(limit or settings.DEFAULT_LIST_LIMIT)
    )
    if search:
        pattern = f"%{search.lower()}%"
        q = q.where(
            or_(
                func.lower(Job.title).like(pattern),
                func.lower(Job.company).like(pattern),
                func.lower(Job.description).like(pattern),
            )
        )
    if job_type:
        q = q.where(Job.type == job_type)
    if location:
        q = q.where(Job.location.contains(location))
    res = await db.execute(q)
    return res.all()


async def get_job(db: AsyncSession, job_id: int):
    """Row (Job, User) or None."""
    q = select(Job, User).join(User, User.id == Job.posted_by_id).where(Job.id == job_id)
    res = await db.execute(q)
    return res.one_or_none()


async def create_job(db: AsyncSession, data: dict[str, Any]) -> Job:
    job = Job(**data)
    db.add(job)
    await db.flush()
    await db.refresh(job)
    return job
