# geohub/core/json.py
import json
from functools import partial
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

# compact, and non-ASCII kept literal ("Naivasha–Longonot", "Ol Doinyo Lengai")
_dumps = partial(json.dumps, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def render_json(content: Any) -> bytes:
    """Encode a response payload (ORM rows via pydantic, datetimes, ...) as UTF-8 JSON."""
    return _dumps(jsonable_encoder(content)).encode("utf-8")


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return render_json(content)
