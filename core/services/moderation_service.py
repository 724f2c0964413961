"""Moderation of reported community content and report review."""

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from django.db import DatabaseError
from django.db.models import QuerySet
from django.utils import timezone

import structlog

from core.constants import PET_SUSPENSION_REASON
from core.enums import HelpRequestState, ModerationAction, ReportStatus, ReportType
from core.models import Report
from core.repositories import (
    HelpRequestRepository,
    PetRepository,
    ProfileRepository,
    RecordStore,
    ReportRepository,
)
from core.schemas.report import (
    ContactSummary,
    ModerationResult,
    ReportDetail,
    ReportStats,
    ReportStatusUpdateRequest,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ModerationRule:
    """How each action maps onto the store holding one kind of content.

    ``delete`` is a hard delete when ``hard_delete`` is set, otherwise it
    applies the ``disable`` fields.
    """

    store: RecordStore
    disable: dict[str, Any]
    enable: dict[str, Any]
    hard_delete: bool
    summary_fields: tuple[str, ...] = field(default=("id",))


class ModerationService:
    """Applies moderation actions and manages the report review workflow.

    Moderating content never modifies the report itself; its status is
    updated separately by the reviewer.
    """

    def __init__(
        self,
        reports: ReportRepository | None = None,
        profiles: ProfileRepository | None = None,
        pets: PetRepository | None = None,
        help_requests: HelpRequestRepository | None = None,
    ) -> None:
        self.reports = reports or ReportRepository()
        self.profiles = profiles or ProfileRepository()
        self.rules: dict[ReportType, ModerationRule] = {
            ReportType.AVISO: ModerationRule(
                store=help_requests or HelpRequestRepository(),
                disable={"state": HelpRequestState.EXPIRED.value},
                enable={"state": HelpRequestState.ACTIVE.value},
                hard_delete=True,
                summary_fields=("id", "title", "state"),
            ),
            ReportType.PETOMATCH: ModerationRule(
                store=pets or PetRepository(),
                disable={
                    "is_active": False,
                    "suspended_by_admin": True,
                    "suspension_reason": PET_SUSPENSION_REASON,
                },
                enable={
                    "is_active": True,
                    "suspended_by_admin": False,
                    "suspension_reason": None,
                },
                hard_delete=True,
                summary_fields=("id", "name", "species", "is_active"),
            ),
            # Accounts are suspended, never removed, from moderation
            ReportType.USER: ModerationRule(
                store=self.profiles,
                disable={"is_active": False, "suspended": True},
                enable={"is_active": True, "suspended": False},
                hard_delete=False,
                summary_fields=("id", "full_name", "email", "is_active", "suspended"),
            ),
        }

    def apply_action(
        self,
        report_type: ReportType | str,
        reported_id: UUID,
        action: ModerationAction | str,
    ) -> ModerationResult:
        """Disable, enable or delete the reported content.

        Issues exactly one update or delete against the content's store.

        Raises:
            ValueError: If the report type or action is unknown.
            RecordNotFoundError: If the reported content does not exist.
        """
        report_type = ReportType(report_type)
        action = ModerationAction(action)
        rule = self.rules[report_type]

        if action is ModerationAction.DELETE and rule.hard_delete:
            rule.store.delete(reported_id)
            message = f"{report_type.value} {reported_id} deleted"
        else:
            fields = rule.enable if action is ModerationAction.ENABLE else rule.disable
            rule.store.update(reported_id, **fields)
            state = "enabled" if action is ModerationAction.ENABLE else "disabled"
            message = f"{report_type.value} {reported_id} {state}"

        logger.info(
            "moderation_action_applied",
            report_type=report_type.value,
            reported_id=str(reported_id),
            action=action.value,
        )
        return ModerationResult(
            report_type=report_type.value,
            reported_id=reported_id,
            action=action.value,
            message=message,
        )

    def moderate_report(
        self, report_id: UUID, action: ModerationAction | str
    ) -> ModerationResult:
        """Apply ``action`` to the content a report points at.

        Raises:
            RecordNotFoundError: If the report or its content does not exist.
        """
        report = self.reports.get_by_id(report_id)
        return self.apply_action(report.report_type, report.reported_id, action)

    def list_reports(
        self, status: str | None = None, report_type: str | None = None
    ) -> QuerySet[Report]:
        """Reports newest first. Pass a page of them to ``describe``."""
        return self.reports.filter(status, report_type)

    def get_report(self, report_id: UUID) -> ReportDetail:
        """Fetch one enriched report.

        Raises:
            RecordNotFoundError: If the report does not exist.
        """
        return self.describe(self.reports.get_by_id(report_id))

    def update_status(
        self,
        report_id: UUID,
        request: ReportStatusUpdateRequest,
        reviewer_id: UUID | None = None,
    ) -> ReportDetail:
        """Record a review decision.

        The reviewer and review time are stamped only when a reviewer is
        known and the report leaves ``pending``.

        Raises:
            RecordNotFoundError: If the report does not exist.
        """
        status = ReportStatus(request.status)
        fields: dict[str, Any] = {"status": status.value}
        if request.notes is not None:
            fields["notes"] = request.notes

        reviewer = request.reviewed_by or reviewer_id
        if reviewer and status is not ReportStatus.PENDING:
            fields["reviewed_by"] = reviewer
            fields["reviewed_at"] = timezone.now()

        self.reports.update(report_id, **fields)
        logger.info(
            "report_status_updated",
            report_id=str(report_id),
            status=status.value,
            reviewed_by=str(reviewer) if reviewer else None,
        )
        return self.get_report(report_id)

    def get_stats(self) -> ReportStats:
        """Report counts by status, type and reason."""
        by_status = self.reports.count_by("status")
        return ReportStats(
            total=sum(by_status.values()),
            pending=by_status.get(ReportStatus.PENDING.value, 0),
            reviewed=by_status.get(ReportStatus.REVIEWED.value, 0),
            resolved=by_status.get(ReportStatus.RESOLVED.value, 0),
            dismissed=by_status.get(ReportStatus.DISMISSED.value, 0),
            by_type=self.reports.count_by("report_type"),
            by_reason=self.reports.count_by("reason"),
        )

    def describe(self, report: Report) -> ReportDetail:
        """Enrich a report with its reporter, reviewer and reported content.

        Lookup failures are logged and leave the field None.
        """
        detail = ReportDetail.model_validate(report)
        detail.reporter = self._contact(report.reporter_id)
        detail.reviewer = self._contact(report.reviewed_by)
        detail.reported_content = self._content(report)
        return detail

    def _contact(self, profile_id: UUID | None) -> ContactSummary | None:
        try:
            summary = self.profiles.contact_summary(profile_id)
        except DatabaseError as e:
            logger.warning(
                "report_contact_lookup_failed", profile_id=str(profile_id), error=str(e)
            )
            return None
        return ContactSummary(**summary) if summary else None

    def _content(self, report: Report) -> dict[str, Any] | None:
        try:
            rule = self.rules[ReportType(report.report_type)]
            return rule.store.summary(report.reported_id, *rule.summary_fields)
        except (ValueError, DatabaseError) as e:
            logger.warning(
                "report_content_lookup_failed",
                report_id=str(report.id),
                report_type=report.report_type,
                error=str(e),
            )
            return None


moderation_service = ModerationService()
