"""Dependency health enumeration used by the readiness probe."""

from enum import Enum


class HealthStatus(str, Enum):
    """Outcome of a single dependency check."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    ERROR = "error"
