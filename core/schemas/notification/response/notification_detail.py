"""Schema for notification details."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationDetail(BaseSchemaModel):
    """Full representation of an admin notification."""

    id: UUID = Field(..., description="Unique identifier for the notification")
    sender_id: UUID = Field(..., description="Administrator or system sender")
    title: str = Field(..., description="Headline")
    message: str = Field(..., description="Body text")
    notification_type: str = Field(..., description="Logical type")
    channel: str = Field(..., description="Delivery medium")
    target_audience: str = Field(..., description="Recipient group")
    specific_users: list[str] = Field(default_factory=list)
    status: str = Field(..., description="Lifecycle status")
    scheduled_for: datetime | None = None
    sent_at: datetime | None = None
    recipient_count: int = Field(..., ge=0)
    open_count: int = Field(..., ge=0)
    click_count: int = Field(..., ge=0)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
