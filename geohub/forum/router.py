# geohub/forum/router.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.core.auth import require_capability
from geohub.core.permissions import Capability
from geohub.core.schemas import MAX_ID, RecordId
from geohub.core.security import TokenIdentity
from geohub.db.session import get_session
from geohub.forum import repository as repo
from geohub.forum.models import ForumCategory, ForumPost, ForumReply
from geohub.forum.schemas import (
    ForumCategoryOut,
    ForumPostCreate,
    ForumPostDetailOut,
    ForumPostListItemOut,
    ForumPostOut,
    ForumReplyCreate,
    ForumReplyOut,
    ForumReplyWithAuthorOut,
)
from geohub.users.models import User
from geohub.users.schemas import UserOut

router = APIRouter(prefix="/api/forum", tags=["forum"])


# ======================= HELPERS =======================

def _post_detail(post: ForumPost, author: User, category: ForumCategory) -> dict:
    return {
        **ForumPostOut.model_validate(post).model_dump(),
        "author": UserOut.model_validate(author),
        "category": ForumCategoryOut.model_validate(category),
    }


def _reply_with_author(reply: ForumReply, author: User) -> ForumReplyWithAuthorOut:
    return ForumReplyWithAuthorOut(
        **ForumReplyOut.model_validate(reply).model_dump(),
        author=UserOut.model_validate(author),
    )


# ======================= CATEGORIES =======================

@router.get("/categories", response_model=List[ForumCategoryOut])
async def list_categories(db: AsyncSession = Depends(get_session)):
    return await repo.get_forum_categories(db)


# ======================= POSTS =======================

@router.get("/posts", response_model=List[ForumPostListItemOut])
async def list_posts(
    category_id: int | None = Query(None, alias="categoryId", le=MAX_ID),
    db: AsyncSession = Depends(get_session),
):
    rows = await repo.get_forum_posts(db, category_id)
    return [
        ForumPostListItemOut(**_post_detail(post, author, category), reply_count=count)
        for post, author, category, count in rows
    ]


@router.get("/posts/{post_id}", response_model=ForumPostDetailOut)
async def get_post(post_id: RecordId, db: AsyncSession = Depends(get_session)):
    row = await repo.get_forum_post(db, post_id)
    if not row:
        raise HTTPException(status_code=404, detail="Post not found")
    post, author, category = row
    return ForumPostDetailOut(**_post_detail(post, author, category))


@router.post("/posts", response_model=ForumPostOut)
async def create_post(
    payload: ForumPostCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.CREATE_POST)),
    db: AsyncSession = Depends(get_session),
):
    try:
        post = await repo.create_forum_post(
            db,
            {**payload.model_dump(), "author_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        # unknown category (or author deleted under us)
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return post


# ======================= REPLIES =======================

@router.get("/posts/{post_id}/replies", response_model=List[ForumReplyWithAuthorOut])
async def list_replies(post_id: RecordId, db: AsyncSession = Depends(get_session)):
    rows = await repo.get_forum_replies(db, post_id)
    return [_reply_with_author(reply, author) for reply, author in rows]


@router.post("/posts/{post_id}/replies", response_model=ForumReplyOut)
async def create_reply(
    post_id: RecordId,
    payload: ForumReplyCreate,
    identity: TokenIdentity = Depends(require_capability(Capability.REPLY_TO_POST)),
    db: AsyncSession = Depends(get_session),
):
    if not await repo.get_forum_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")

    try:
        reply = await repo.create_forum_reply(
            db,
            {**payload.model_dump(), "post_id": post_id, "author_id": identity.user_id},
        )
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")
    return reply
