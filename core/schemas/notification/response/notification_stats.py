"""Schema for notification statistics."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.notification.response.delivery_breakdown import DeliveryBreakdown


class NotificationStats(BaseSchemaModel):
    """Dashboard statistics across all admin notifications.

    Rates are percentages rounded to whole numbers: opens per recipient and
    clicks per open. Because counters are not deduplicated, either can
    exceed 100.
    """

    total: int = Field(..., ge=0)
    draft: int = Field(..., ge=0)
    scheduled: int = Field(..., ge=0)
    sending: int = Field(..., ge=0)
    sent: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    total_recipients: int = Field(..., ge=0)
    total_opens: int = Field(..., ge=0)
    total_clicks: int = Field(..., ge=0)
    open_rate: int = Field(..., ge=0, description="Opens per recipient, percent")
    click_rate: int = Field(..., ge=0, description="Clicks per open, percent")
    by_channel: dict[str, DeliveryBreakdown] = Field(default_factory=dict)
    by_type: dict[str, DeliveryBreakdown] = Field(default_factory=dict)
