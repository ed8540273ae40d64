"""Health & Readiness Probes.

Invariants:
    - GET / always returns 200 if the process is up (liveness)
    - GET /ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from light_api.api.dependencies import get_db_manager
from light_api.infrastructure.database import DatabaseSessionManager
from light_api.schemas.user import HealthCheckResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

HEALTH_MESSAGE = "Hello! Light API server is running. Database connection is OK."


@router.get(
    "/", response_model=HealthCheckResponse, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe."""
    return HealthCheckResponse(status="ok", message=HEALTH_MESSAGE)


@router.get("/ready")
async def readiness_check(
    db: DatabaseSessionManager | None = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    db_ok = await db.health_check() if db else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
