"""
Health check endpoints for the application.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from fieldops.api.dependencies import DbSessionDep
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.infrastructure.monitoring.health_checks import HealthChecker
from fieldops.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
    set_uptime,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

_started = time.monotonic()


async def get_health_checker(db: DbSessionDep) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
async def health_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Basic health check endpoint."""
    health = await health_checker.get_overall_health()
    return {
        "success": health["status"] == "healthy",
        "message": f"{settings.APP_NAME} is {health['status']}",
        "data": {
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            **health,
        },
    }


@router.get("/ready")
async def readiness_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Readiness check for Kubernetes."""
    if not await health_checker.check_readiness():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return {"status": "ready", "timestamp": _now()}


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for Kubernetes."""
    return {"status": "alive", "timestamp": _now()}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metrics disabled")

    set_uptime(time.monotonic() - _started)
    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
