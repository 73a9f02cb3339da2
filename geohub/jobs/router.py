# geohub/jobs/router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import require_capability
from geohub.core.config import settings
from geohub.core.permissions import Capability
from geohub.core.schemas import RecordId
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.jobs import repository as repo
from geohub.jobs.models import Job
from geohub.jobs.schemas import JobCreate, JobOut, JobWithPosterOut
from geohub.users.models import User
from geohub.users.schemas import UserOut

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def _job_out(job: Job, poster: User) -> JobWithPosterOut:
    return JobWithPosterOut(
        **JobOut.model_validate(job).model_dump(),
        posted_by=UserOut.model_validate(poster),
    )


@router.get("", response_model=List[JobWithPosterOut])
async def list_jobs(
    limit: int | None = Query(None, ge=1, le=settings.MAX_LIST_LIMIT),
    search: str | None = Query(None),
    job_type: str | None = Query(None, alias="type"),
    location: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
):
    rows = await repo.get_jobs(
        db,
        limit,
        search=search,
        job_type=job_type,
        location=location,
    )
    return [_job_out(job, poster) for job, poster in rows]


@router.get("/{job_id}", response_model=JobWithPosterOut)
async def get_job(job_id: RecordId, db: AsyncSession = Depends(get_session)):
    row = await repo.get_job(db, job_id)
    if not row:
        raise HTTPException(status_code=404, detail="Job not found")
    job, poster = row
    return _job_out(job, poster)


@router.post("", response_model=JobOut)
async def create_job(
    payload: JobCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.POST_JOB)),
    db: AsyncSession = Depends(get_session),
):
    try:
        job = await repo.create_job(
            db,
            {**payload.model_dump(), "posted_by_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return job
