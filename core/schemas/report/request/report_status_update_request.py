"""Schema for report review updates."""

from uuid import UUID

from pydantic import Field

from core.enums import ReportStatus
from core.schemas.base_schema_model import BaseSchemaModel


class ReportStatusUpdateRequest(BaseSchemaModel):
    """New review status for a report.

    When ``reviewed_by`` is omitted the authenticated administrator is
    recorded as the reviewer.
    """

    status: ReportStatus
    notes: str | None = Field(None, description="Reviewer notes")
    reviewed_by: UUID | None = Field(None, description="Reviewing administrator")
