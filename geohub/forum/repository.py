# geohub/forum/repository.py
from __future__ import annotations

from typing import Any

from sqlalchemy import select, desc, func
from sqlalchemy.ext.asyncio import AsyncSession

from geohub.forum.models import ForumCategory, ForumPost, ForumReply
from geohub.users.models import User


# -------------------------
# CATEGORIES
# -------------------------
async def get_forum_categories(db: AsyncSession) -> list[ForumCategory]:
    res = await db.execute(select(ForumCategory).order_by(ForumCategory.id.asc()))
    return list(res.scalars())


async def create_forum_category(db: AsyncSession, data: dict[str, Any]) -> ForumCategory:
    category = ForumCategory(**data)
    db.add(category)
    await db.flush()
    await db.refresh(category)
    return category


# -------------------------
# POSTS
# -------------------------
async def get_forum_posts(db: AsyncSession, category_id: int | None = None):
    """
    Posts newest first, each with its author, category and reply count.
    Returns rows (ForumPost, User, ForumCategory, reply_count).
    """
    reply_count = func.count(ForumReply.id).label("reply_count")
    q = (
        select(ForumPost, User, ForumCategory, reply_count)
        .join(User, User.id == ForumPost.author_id)
        .join(ForumCategory, ForumCategory.id == ForumPost.category_id)
        .outerjoin(ForumReply, ForumReply.post_id == ForumPost.id)
        .group_by(ForumPost.id, User.id, ForumCategory.id)
        .order_by(desc(ForumPost.created_at), desc(ForumPost.id))
    )
    if category_id is not None:
        q = q.where(ForumPost.category_id == category_id)
    res = await db.execute(q)
    return res.all()


async def get_forum_post(db: AsyncSession, post_id: int):
    """Row (ForumPost, User, ForumCategory) or None."""
    q = (
        select(ForumPost, User, ForumCategory)
        .join(User, User.id == ForumPost.author_id)
        .join(ForumCategory, ForumCategory.id == ForumPost.category_id)
        .where(ForumPost.id == post_id)
    )
    res = await db.execute(q)
    return res.one_or_none()


async def create_forum_post(db: AsyncSession, data: dict[str, Any]) -> ForumPost:
    post = ForumPost(**data)
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post


# -------------------------
# REPLIES
# -------------------------
async def get_forum_replies(db: AsyncSession, post_id: int):
    """Rows (ForumReply, User), oldest first."""
    q = (
        select(ForumReply, User)
        .join(User, User.id == ForumReply.author_id)
        .where(ForumReply.post_id == post_id)
        .order_by(ForumReply.created_at.asc(), ForumReply.id.asc())
    )
    res = await db.execute(q)
    return res.all()


async def create_forum_reply(db: AsyncSession, data: dict[str, Any]) -> ForumReply:
    reply = ForumReply(**data)
    db.add(reply)
    await db.flush()
    await db.refresh(reply)
    return reply
