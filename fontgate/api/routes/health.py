"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health[/] always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the database store is unreachable
    - The memory store backend is always ready
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import fontgate.infrastructure.database as db_module
from fontgate.config import Settings, get_settings
from fontgate.core.domain_types import StoreBackend

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "fontgate"
SERVICE_VERSION = "1.0.0"


@router.get("", status_code=status.HTTP_200_OK)
@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — includes store connectivity."""
    if settings.store_backend == StoreBackend.MEMORY:
        store_ok = True
    else:
        manager = db_module.db_manager
        store_ok = await manager.health_check() if manager else False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
