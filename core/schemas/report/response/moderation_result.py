"""Schema for the result of a moderation action."""

from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel


class ModerationResult(BaseSchemaModel):
    """What was done to the reported content."""

    report_type: str
    reported_id: UUID
    action: str
    message: str
