"""Report and moderation schemas."""

from core.schemas.report.request.moderation_request import ModerationRequest
from core.schemas.report.request.report_status_update_request import (
    ReportStatusUpdateRequest,
)
from core.schemas.report.response.contact_summary import ContactSummary
from core.schemas.report.response.moderation_result import ModerationResult
from core.schemas.report.response.report_detail import ReportDetail
from core.schemas.report.response.report_stats import ReportStats

__all__ = [
    "ContactSummary",
    "ModerationRequest",
    "ModerationResult",
    "ReportDetail",
    "ReportStats",
    "ReportStatusUpdateRequest",
]
