import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class HealthCheckResult:
    """Result of a health check."""

    service: str
    status: Literal["healthy", "unhealthy", "degraded"]
    connected: bool
    details: dict
    error: str | None = None


@dataclass
class OverallHealthStatus:
    """Overall health status with individual service results."""

    status: Literal["healthy", "degraded", "unhealthy"]
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Service for performing health checks on system components."""

    def __init__(self, db: AsyncSession, training_pool_ready: bool = True):
        self.db = db
        self.training_pool_ready = training_pool_ready

    async def check_database_health(self) -> HealthCheckResult:
        """Database connection health check."""
        try:
            result = await self.db.execute(text("SELECT 1 as test"))
            test_value = result.scalar()

            return HealthCheckResult(
                service="database",
                status="healthy",
                connected=True,
                details={"test_query_result": test_value},
            )
        except Exception as e:
            logger.error(f"Database health check error: {e}")
            return HealthCheckResult(
                service="database",
                status="unhealthy",
                connected=False,
                details={},
                error=str(e),
            )

    async def check_training_pool_health(self) -> HealthCheckResult:
        """The prediction pool is created at startup; without it fits cannot run."""
        return HealthCheckResult(
            service="training_pool",
            status="healthy" if self.training_pool_ready else "degraded",
            connected=self.training_pool_ready,
            details={},
        )

    async def run_all_checks(self) -> OverallHealthStatus:
        """Run all health checks in parallel and return overall status."""
        results = await asyncio.gather(
            self.check_database_health(),
            self.check_training_pool_health(),
        )

        overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
        for result in results:
            if result.status == "unhealthy":
                overall_status = "unhealthy"
            elif result.status == "degraded" and overall_status == "healthy":
                overall_status = "degraded"

        return OverallHealthStatus(
            status=overall_status,
            services={result.service: result for result in results},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
