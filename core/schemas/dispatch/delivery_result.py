"""Delivery result schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DeliveryResult(BaseSchemaModel):
    """Uniform result of dispatching a notification on any channel.

    ``attempted_count`` is what the notification's ``recipient_count``
    records on success; ``delivered_count`` may be lower when individual
    per-recipient inserts fail.
    """

    success: bool = Field(..., description="Whether the dispatch succeeded")
    message: str = Field(..., description="Human-readable outcome")
    attempted_count: int = Field(default=0, ge=0, description="Recipients attempted")
    delivered_count: int = Field(
        default=0, ge=0, description="Recipients handed off successfully"
    )
