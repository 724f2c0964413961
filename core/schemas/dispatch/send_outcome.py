"""Send outcome schema."""

from pydantic import Field

from core.enums import NotificationLifecycle
from core.schemas.base_schema_model import BaseSchemaModel


class SendOutcome(BaseSchemaModel):
    """Result of one manual or scheduled send of a notification."""

    success: bool = Field(..., description="Whether the notification was sent")
    message: str = Field(..., description="Human-readable outcome")
    recipient_count: int = Field(default=0, ge=0, description="Recipients attempted")
    found: bool = Field(default=True, description="Whether the notification exists")
    dispatched: bool = Field(
        default=False, description="Whether the send pipeline ran"
    )
    final_status: NotificationLifecycle | None = Field(
        None, description="Status after the send (None if missing or unrecognised)"
    )
