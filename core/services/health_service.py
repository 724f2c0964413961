"""Health checks for the liveness and readiness probes."""

import time
from collections.abc import Callable

from django.core.cache import cache
from django.db import DatabaseError, connection

import structlog

from core.enums import HealthStatus
from core.schemas.health import DependencyHealth, LivenessResponse, ReadinessResponse

logger = structlog.get_logger(__name__)


class HealthService:
    """Checks the database and Redis, caching each result briefly."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cached: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Readiness with dependency details.

        A failed dependency makes the service ``degraded`` but still ready.
        """
        dependencies = {
            "database": self.check_database_health(),
            "redis": self.check_redis_health(),
        }
        degraded = not all(dep.healthy for dep in dependencies.values())
        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def check_database_health(self) -> DependencyHealth:
        return self._cached_check("database", self._check_database)

    def check_redis_health(self) -> DependencyHealth:
        return self._cached_check("redis", self._check_redis)

    def _cached_check(
        self, name: str, check: Callable[[], tuple[bool, str]]
    ) -> DependencyHealth:
        now = time.time()
        cached = self._cached.get(name)
        if cached and now - cached[0] < self.cache_ttl_seconds:
            return cached[1]

        start = time.perf_counter()
        try:
            healthy, message = check()
            status = HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY
        except DatabaseError as e:
            healthy, status, message = False, HealthStatus.UNHEALTHY, f"{name} check failed: {e}"
        except Exception as e:
            healthy, status, message = False, HealthStatus.ERROR, f"{name} check failed: {e}"

        if not healthy:
            logger.warning("dependency_unhealthy", dependency=name, message=message)

        health = DependencyHealth(
            healthy=healthy,
            status=status,
            message=message,
            response_time_ms=(time.perf_counter() - start) * 1000,
        )
        self._cached[name] = (now, health)
        return health

    @staticmethod
    def _check_database() -> tuple[bool, str]:
        connection.ensure_connection()
        return True, "Database connection successful"

    @staticmethod
    def _check_redis() -> tuple[bool, str]:
        cache.set("__health_check__", "ok", timeout=1)
        if cache.get("__health_check__") == "ok":
            return True, "Redis connection successful"
        return False, "Redis health check returned an unexpected value"


health_service = HealthService()
