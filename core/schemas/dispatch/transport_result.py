"""Transport result schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class TransportResult(BaseSchemaModel):
    """Outcome of handing one batch to an email or SMS transport."""

    success: bool = Field(..., description="Whether the batch was accepted")
    message: str = Field(default="", description="Human-readable outcome")
    accepted_count: int = Field(
        default=0, ge=0, description="Destinations accepted for delivery"
    )
    job_id: str | None = Field(None, description="Background job handling the batch")
