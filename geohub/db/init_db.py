# geohub/db/init_db.py
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncEngine

from geohub.core.config import settings
from geohub.db.base import Base
from geohub.db.session import engine, AsyncSessionLocal

# every model must be imported so Base.metadata knows the table
from geohub.users.models import User  # noqa: F401
from geohub.forum.models import ForumCategory, ForumPost, ForumReply  # noqa: F401
from geohub.jobs.models import Job  # noqa: F401
from geohub.resources.models import Resource  # noqa: F401
from geohub.events.models import Event, EventRegistration  # noqa: F401
from geohub.messages.models import Message  # noqa: F401
from geohub.forum.repository import create_forum_category

log = logging.getLogger("uvicorn")


DEFAULT_FORUM_CATEGORIES = [
    {
        "name": "Job Frustrations",
        "description": "Vent, compare notes and get support on the job hunt.",
        "icon": "frown",
        "color": "text-red-600 bg-red-100",
    },
    {
        "name": "Research Ideas",
        "description": "Pitch and refine research topics, methods and collaborations.",
        "icon": "lightbulb",
        "color": "text-blue-600 bg-blue-100",
    },
    {
        "name": "Success Stories",
        "description": "Share wins: new roles, publications, discoveries.",
        "icon": "trophy",
        "color": "text-green-600 bg-green-100",
    },
    {
        "name": "Internship Alerts",
        "description": "Attachments and internships with survey, mining and energy firms.",
        "icon": "bell",
        "color": "text-orange-600 bg-orange-100",
    },
    {
        "name": "Professional Advice",
        "description": "Licensing, field safety, consulting and career guidance.",
        "icon": "briefcase",
        "color": "text-purple-600 bg-purple-100",
    },
    {
        "name": "Career Change",
        "description": "Moving into (or out of) geoscience: paths and experiences.",
        "icon": "shuffle",
        "color": "text-indigo-600 bg-indigo-100",
    },
]


async def seed_forum_categories() -> int:
    """Inserts the default categories on an empty table. Returns rows added."""
    async with AsyncSessionLocal() as db:
        res = await db.execute(select(func.count(ForumCategory.id)))
        if res.scalar_one():
            return 0
        for data in DEFAULT_FORUM_CATEGORIES:
            await create_forum_category(db, data)
        await db.commit()
        return len(DEFAULT_FORUM_CATEGORIES)


async def create_tables(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_models():
    """
    Creates/verifies every table declared on Base.metadata and seeds
    the forum categories.
    """
    try:
        await create_tables()
        log.info("✅ DB init: tables created/verified.")
        if settings.SEED_FORUM_CATEGORIES:
            added = await seed_forum_categories()
            if added:
                log.info("🌱 seeded %d forum categories", added)
    except Exception as e:
        log.error(f"❌ DB init failed: {e!r}")
        raise
