"""Dependency health schema."""

from pydantic import Field

from core.enums import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Result of checking one backing service (database or Redis)."""

    healthy: bool = Field(..., description="Whether the dependency answered")
    status: HealthStatus = Field(..., description="Check outcome")
    message: str = Field(..., description="Human-readable result")
    response_time_ms: float | None = Field(None, description="Check duration")
