# geohub/db/session.py
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from geohub.core.config import settings


def build_engine(db_url: str) -> AsyncEngine:
    # short timeouts: if the DB does not answer, fail fast (5s)
    if db_url.startswith("postgresql+psycopg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=5,
            max_overflow=10,
            connect_args={"connect_timeout": 5},
        )

    if db_url.startswith("postgresql+asyncpg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=5,
            max_overflow=10,
            connect_args={
                "timeout": 5,
                "server_settings": {"client_encoding": "UTF8"},
            },
        )

    if db_url.startswith("sqlite+aiosqlite"):
        # one connection per session, FKs enforced like on Postgres
        eng = create_async_engine(
            db_url,
            poolclass=NullPool,
            connect_args={"timeout": 15},
        )

        @event.listens_for(eng.sync_engine, "connect")
        def _sqlite_fk_on(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        return eng

    return create_async_engine(db_url, pool_pre_ping=True)


# async driver -> sync driver, for tools that need a blocking engine (alembic)
_SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg",
    "postgresql": "postgresql+psycopg",
    "sqlite+aiosqlite": "sqlite",
}


def sync_database_url(db_url: str) -> str:
    scheme, sep, rest = db_url.partition("://")
    return _SYNC_DRIVERS.get(scheme, scheme) + sep + rest


engine = build_engine(settings.DATABASE_URL)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
