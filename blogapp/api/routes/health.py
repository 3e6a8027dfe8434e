"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable or any of
      the users / blog_posts / comments tables is missing (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from blogapp.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str, **detail) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **detail},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "blog-api"}


@router.get("/ready")
async def readiness_check():
    """Readiness: the store answers and the blog schema has been applied."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        return _not_ready("database_unavailable")
    missing = await manager.missing_tables()
    if missing:
        logger.warning(f"Blog schema incomplete, missing tables: {missing}")
        return _not_ready("schema_missing", missing_tables=missing)
    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "applied"},
    }
