# geohub/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geohub.core.json import UTF8JSONResponse
from geohub.core.config import settings
from geohub.core.errors import register_exception_handlers
from geohub.db.init_db import init_models

# routers
from geohub.users.router import auth_router, router as users_router
from geohub.forum.router import router as forum_router
from geohub.jobs.router import router as jobs_router
from geohub.resources.router import router as resources_router
from geohub.events.router import router as events_router
from geohub.messages.router import router as messages_router

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="GeoHub API",
    default_response_class=UTF8JSONResponse,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    log.info("🚀 Starting GeoHub API…")
    await init_models()
    log.info("✅ Startup done.")


@app.get("/api/health")
async def health():
    return {"ok": True, "service": "geohub"}


# routers
app.include_router(auth_router)       # /api/auth/...
app.include_router(users_router)      # /api/users/...
app.include_router(forum_router)      # /api/forum/...
app.include_router(jobs_router)       # /api/jobs/...
app.include_router(resources_router)  # /api/resources/...
app.include_router(events_router)     # /api/events/...
app.include_router(messages_router)   # /api/messages/...
