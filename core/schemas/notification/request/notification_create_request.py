"""Schema for creating admin notifications."""

from datetime import datetime
from typing import Any

from pydantic import Field

from core.enums import Channel, NotificationKind, TargetAudience
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationCreateRequest(BaseSchemaModel):
    """Request body for composing a notification.

    The notification is stored as a draft, or as scheduled when
    ``scheduled_for`` is given.
    """

    title: str = Field(..., min_length=1, max_length=255, description="Headline")
    message: str = Field(..., min_length=1, description="Body text")
    notification_type: NotificationKind = Field(
        default=NotificationKind.INFO, description="Logical type"
    )
    channel: Channel = Field(default=Channel.IN_APP, description="Delivery medium")
    target_audience: TargetAudience = Field(
        default=TargetAudience.ALL, description="Recipient group"
    )
    specific_users: list[str] = Field(
        default_factory=list,
        description="Emails or profile IDs, used with the 'specific' audience",
    )
    scheduled_for: datetime | None = Field(None, description="Advisory send time")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra data")
