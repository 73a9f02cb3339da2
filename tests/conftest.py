# tests/conftest.py
import os
import tempfile
from pathlib import Path

# settings are read at import time: point everything at a throwaway SQLite file
_DB_DIR = Path(tempfile.mkdtemp(prefix="geohub-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR / 'test.db'}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SEED_FORUM_CATEGORIES"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from geohub.db.base import Base  # noqa: E402
from geohub.db.init_db import create_tables  # noqa: E402
from geohub.db.session import AsyncSessionLocal, engine  # noqa: E402
from geohub.main import app  # noqa: E402


@pytest.fixture(autouse=True)
async def schema():
    await create_tables()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def db():
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def register(client):
    """
    await register("amina") -> (user_json, token)
    """

    async def _register(username: str, **extra):
        body = {
            "username": username,
            "email": f"{username}@example.com",
            "password": "rift-valley-42",
            "fullName": username.title(),
            **extra,
        }
        res = await client.post("/api/auth/register", json=body)
        assert res.status_code == 200, res.text
        data = res.json()
        return data["user"], data["token"]

    return _register


@pytest.fixture
def category(db):
    from geohub.forum.repository import create_forum_category

    async def _category(name: str = "Research Ideas"):
        cat = await create_forum_category(
            db,
            {"name": name, "description": f"{name} threads", "icon": "lightbulb", "color": "blue"},
        )
        await db.commit()
        return cat

    return _category
