# geohub/core/schemas.py
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ids are INTEGER columns; anything larger can never match a row
MAX_ID = 2**31 - 1

RecordId = Annotated[int, Path(le=MAX_ID)]


class CamelModel(BaseModel):
    """
    Base for every request/response body: snake_case in Python,
    camelCase on the wire (fullName, authorId, replyCount, ...).
    Accepts either spelling on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
