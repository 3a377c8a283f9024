"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

Provides multiple health check endpoints:
- /health: Basic liveness check (always returns 200)
- /health/db: Database connectivity check
- /health/ready: Readiness check (all dependencies healthy)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fleet_rentals.api.deps import get_sessionmaker
from fleet_rentals.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "fleet-rentals-api"


async def _database_healthy(settings: Settings) -> bool:
    if settings.use_in_memory:
        return True
    try:
        async with get_sessionmaker()() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running.
    """
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias for /health for Kubernetes liveness probe."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(settings: Settings = Depends(get_settings)):
    """
    Database connectivity health check.

    Returns 503 Service Unavailable if database is down.
    """
    backend = "in_memory" if settings.use_in_memory else "sql"
    if await _database_healthy(settings):
        return {"status": "healthy", "component": "database", "backend": backend}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": "database",
            "backend": backend,
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(settings: Settings = Depends(get_settings)):
    """
    Readiness probe for K8s/orchestration.

    Returns 503 if not ready to accept requests.
    """
    if await _database_healthy(settings):
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "checks": {"database": "unhealthy"}},
    )
