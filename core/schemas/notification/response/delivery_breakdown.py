"""Schema for per-channel or per-type delivery counts."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DeliveryBreakdown(BaseSchemaModel):
    """Sent and failed counts for one channel or notification type."""

    sent: int = Field(default=0, ge=0, description="Notifications sent")
    failed: int = Field(default=0, ge=0, description="Notifications failed")
    total: int = Field(default=0, ge=0, description="All notifications")
