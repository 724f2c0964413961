"""Moderation report model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import ReportReason, ReportStatus, ReportType


class Report(models.Model):
    """User-submitted flag against a help-network post, a pet or a user.

    Reports are created by the apps; the admin service only advances their
    status and moderates the referenced content.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reporter_id = models.UUIDField()
    report_type = models.CharField(
        max_length=20, choices=[(t.value, t.value) for t in ReportType]
    )
    reported_id = models.UUIDField()
    reason = models.CharField(
        max_length=20, choices=[(r.value, r.value) for r in ReportReason]
    )
    description = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in ReportStatus],
        default=ReportStatus.PENDING.value,
    )
    notes = models.TextField(null=True, blank=True)
    reviewed_by = models.UUIDField(null=True, blank=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "reports"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of report."""
        return f"{self.report_type} report on {self.reported_id} ({self.status})"
