"""Schema for moderating reported content."""

from pydantic import Field

from core.enums import ModerationAction
from core.schemas.base_schema_model import BaseSchemaModel


class ModerationRequest(BaseSchemaModel):
    """Action to apply to the content a report points at."""

    action: ModerationAction = Field(..., description="disable, enable or delete")
