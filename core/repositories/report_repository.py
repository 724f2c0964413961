"""Record store for moderation reports."""

from typing import Any

from django.db.models import Count, QuerySet

from core.models import Report
from core.repositories.record_store import RecordStore


class ReportRepository(RecordStore[Report]):
    """Queries on the ``reports`` table."""

    model = Report
    entity_name = "report"

    def filter(
        self, status: str | None = None, report_type: str | None = None
    ) -> QuerySet[Report]:
        """Reports newest first, optionally narrowed by status and type."""
        queryset = Report.objects.all()
        if status:
            queryset = queryset.filter(status=status)
        if report_type:
            queryset = queryset.filter(report_type=report_type)
        return queryset.order_by("-created_at")

    def count_by(self, field: str) -> dict[Any, int]:
        """Report counts keyed by the values of one column."""
        rows = Report.objects.order_by().values(field).annotate(count=Count("id"))
        return {row[field]: row["count"] for row in rows}
