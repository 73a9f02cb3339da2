# geohub/db/base.py
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# list[str] columns (skills, requirements): JSONB on Postgres, JSON elsewhere
StringList = JSON().with_variant(JSONB(), "postgresql")
