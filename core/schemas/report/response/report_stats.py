"""Schema for report statistics."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ReportStats(BaseSchemaModel):
    """Report counts for the moderation dashboard."""

    total: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    reviewed: int = Field(..., ge=0)
    resolved: int = Field(..., ge=0)
    dismissed: int = Field(..., ge=0)
    by_type: dict[str, int] = Field(default_factory=dict)
    by_reason: dict[str, int] = Field(default_factory=dict)
