"""Schema for editing draft notifications."""

from typing import Any

from pydantic import Field

from core.enums import Channel, NotificationKind, TargetAudience
from core.schemas.base_schema_model import BaseSchemaModel


class NotificationUpdateRequest(BaseSchemaModel):
    """Partial update of a draft; omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    message: str | None = Field(None, min_length=1)
    notification_type: NotificationKind | None = None
    channel: Channel | None = None
    target_audience: TargetAudience | None = None
    specific_users: list[str] | None = None
    metadata: dict[str, Any] | None = None
