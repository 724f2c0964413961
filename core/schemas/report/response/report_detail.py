"""Schema for report details."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.report.response.contact_summary import ContactSummary


class ReportDetail(BaseSchemaModel):
    """A report enriched with the people and content it references.

    Enrichment fields are None when the referenced row is gone or could not
    be loaded.
    """

    id: UUID
    reporter_id: UUID
    report_type: str
    reported_id: UUID
    reason: str
    description: str | None = None
    status: str
    notes: str | None = None
    reviewed_by: UUID | None = None
    reviewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    reporter: ContactSummary | None = None
    reviewer: ContactSummary | None = None
    reported_content: dict[str, Any] | None = Field(
        None, description="Summary of the reported post, pet or user"
    )
