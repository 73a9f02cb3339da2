# geohub/resources/router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import get_current_identity, require_capability
from geohub.core.permissions import Capability, can_delete_resource
from geohub.core.schemas import RecordId
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.resources import repository as repo
from geohub.resources.models import Resource
from geohub.resources.schemas import ResourceCreate, ResourceOut, ResourceWithUploaderOut
from geohub.users.models import User
from geohub.users.schemas import UserOut

router = APIRouter(prefix="/api/resources", tags=["resources"])


def _resource_out(resource: Resource, uploader: User) -> ResourceWithUploaderOut:
    return ResourceWithUploaderOut(
        **ResourceOut.model_validate(resource).model_dump(),
        uploaded_by=UserOut.model_validate(uploader),
    )


@router.get("", response_model=List[ResourceWithUploaderOut])
async def list_resources(
    category: str | None = Query(None),
    search: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
):
    rows = await repo.get_resources(db, category, search=search)
    return [_resource_out(resource, uploader) for resource, uploader in rows]


@router.get("/{resource_id}", response_model=ResourceWithUploaderOut)
async def get_resource(resource_id: RecordId, db: AsyncSession = Depends(get_session)):
    row = await repo.get_resource(db, resource_id)
    if not row:
        raise HTTPException(status_code=404, detail="Resource not found")
    resource, uploader = row
    return _resource_out(resource, uploader)


@router.post("", response_model=ResourceOut)
async def create_resource(
    payload: ResourceCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.UPLOAD_RESOURCE)),
    db: AsyncSession = Depends(get_session),
):
    try:
        resource = await repo.create_resource(
            db,
            {**payload.model_dump(), "uploaded_by_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return resource


@router.post("/{resource_id}/download")
async def download_resource(resource_id: RecordId, db: AsyncSession = Depends(get_session)):
    # public: anyone may download
    touched = await repo.increment_download_count(db, resource_id)
    if not touched:
        await db.rollback()
        raise HTTPException(status_code=404, detail="Resource not found")
    await db.commit()
    return {"message": "Download count incremented"}


@router.delete("/{resource_id}")
async def delete_resource(
    resource_id: RecordId,
    identity: TokenIdentity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_session),
):
    row = await repo.get_resource(db, resource_id)
    if not row:
        raise HTTPException(status_code=404, detail="Resource not found")

    resource, _uploader = row
    if not can_delete_resource(identity, resource):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this resource",
        )

    await repo.delete_resource(db, resource_id)
    await db.commit()
    return {"success": True}
