"""Readiness response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Readiness probe body.

    The service reports ``degraded`` rather than not ready when a dependency
    is down, so the admin dashboard stays reachable.
    """

    ready: bool
    status: str = Field(..., description="'ready' or 'degraded'")
    degraded: bool
    dependencies: dict[str, DependencyHealth]
