"""Schema for scheduling notifications."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationScheduleRequest(BaseSchemaModel):
    """Request body for scheduling or rescheduling a notification."""

    scheduled_for: datetime = Field(..., description="When the notification is due")
