"""Probes — is the API process alive, and can it reach its database.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the event loop is serving
    - GET /api/v1/health/ready answers 503 until db_manager exists and
      answers SELECT 1

Design Decisions:
    - db_manager is read through the module on each call: it is only assigned
      by init_db during startup, after this module was imported
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import marketplace.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: no dependencies checked."""
    return {
        "status": "healthy",
        "service": "marketplace-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: 200 only when the database answers."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
