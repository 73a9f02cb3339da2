# alembic/env.py
from __future__ import annotations

from logging.config import fileConfig

from sqlalchemy import create_engine
from alembic import context

from geohub.core.config import settings
from geohub.db.base import Base
from geohub.db.session import sync_database_url
import geohub.db.init_db  # noqa: F401  registers every model on Base.metadata

config = context.config
if config.config_file_name:
    fileConfig(config.config_file_name)

DB_URL = sync_database_url(settings.DATABASE_URL)


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        # SQLite cannot ALTER most constraints in place
        render_as_batch=DB_URL.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline():
    _configure(url=DB_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(DB_URL)
    try:
        with connectable.connect() as connection:
            _configure(connection=connection)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
