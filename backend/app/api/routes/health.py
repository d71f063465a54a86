"""Health Routes — liveness and database readiness.

Invariants:
    - GET /api/health/ answers 200 whenever the process is serving
    - GET /api/health/ready answers 503 until a session manager exists and
      can run SELECT 1

Design Decisions:
    - db_manager is read through the database module on every call: it is
      assigned during lifespan startup, after this module is imported
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.infrastructure import database

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def liveness(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness():
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
