"""
Health check implementations for the application.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.config.logging import get_logger

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.checks = {
            "database": self._check_database,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await check_func()
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def _check_database(self) -> Dict[str, Any]:
        """Check database health with a trivial round trip."""
        started = time.perf_counter()
        await self.db_session.execute(text("SELECT 1"))
        elapsed_ms = (time.perf_counter() - started) * 1000
        return {"status": "healthy", "response_time_ms": round(elapsed_ms, 2)}

    async def get_overall_health(self) -> Dict[str, Any]:
        """Get overall application health status."""
        services = await self.run_health_checks()
        healthy = all(result.get("status") == "healthy" for result in services.values())
        return {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": services,
        }

    async def check_readiness(self) -> bool:
        """Check if the service is ready to receive traffic."""
        health = await self.get_overall_health()
        return health["status"] == "healthy"
