"""Liveness response schema."""

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Liveness probe body; ``status`` is always ``alive``."""

    status: str = "alive"
