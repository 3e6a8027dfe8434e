"""Blog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly; /users and /blogs dispatch to their resource handlers
    - Global error handlers map BlogError → structured JSON responses
    - Database initialized on startup via lifespan context manager
    - An unreachable store at startup is logged, not fatal; requests then fail with 503

Design Decisions:
    - Static client mounted AFTER API routes so /users and /blogs take precedence
    - Homepage served explicitly so "/" works even when directory listing is off
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from blogapp.api.error_handlers import register_error_handlers
from blogapp.api.routes import blogs, health, users
from blogapp.config import get_settings
from blogapp.infrastructure import database
from blogapp.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    if await manager.health_check():
        logger.info("Connected to database")
    else:
        logger.error("Database unreachable at startup; serving anyway")
    logger.info("Blog API started")
    yield
    await manager.dispose()
    logger.info("Blog API shutting down")


app = FastAPI(title="Blog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(blogs.router)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def homepage():
    return FileResponse(os.path.join(settings.static_dir, "index.html"))


if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
