"""Admin notification management and the send pipeline.

A send runs three stages in order: the AudienceResolver turns the target
audience into recipients, the ChannelDispatcher delivers on the channel,
and the DeliveryAccountant records the outcome on the notification.
"""

from datetime import datetime
from uuid import UUID

from django.db.models import QuerySet
from django.utils import timezone

import structlog

from core.constants import SYSTEM_SENDER_ID
from core.enums import NotificationLifecycle
from core.exceptions import ConflictError, RecordNotFoundError
from core.models import Notification
from core.repositories import NotificationRepository
from core.schemas.dispatch import SendOutcome
from core.schemas.notification import (
    DeliveryBreakdown,
    NotificationCreateRequest,
    NotificationStats,
    NotificationUpdateRequest,
)
from core.services.audience_resolver import AudienceResolver
from core.services.channel_dispatcher import ChannelDispatcher
from core.services.delivery_accountant import DeliveryAccountant
from core.services.feedback import Feedback

logger = structlog.get_logger(__name__)

SEND_FAILED_MESSAGE = "Error sending the notification"


def _percent(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


class NotificationService:
    """Service for composing, scheduling, sending and tracking notifications."""

    def __init__(
        self,
        notifications: NotificationRepository | None = None,
        resolver: AudienceResolver | None = None,
        dispatcher: ChannelDispatcher | None = None,
        accountant: DeliveryAccountant | None = None,
    ) -> None:
        self.notifications = notifications or NotificationRepository()
        self.resolver = resolver or AudienceResolver()
        self.dispatcher = dispatcher or ChannelDispatcher()
        self.accountant = accountant or DeliveryAccountant(self.notifications)

    def list_notifications(self) -> QuerySet[Notification]:
        """All notifications, newest first."""
        return self.notifications.get_all()

    def get_notification(self, notification_id: UUID) -> Notification:
        """Fetch one notification.

        Raises:
            RecordNotFoundError: If the notification does not exist.
        """
        return self.notifications.get_by_id(notification_id)

    def create_notification(
        self, request: NotificationCreateRequest, sender_id: UUID | None = None
    ) -> Notification:
        """Store a new notification as a draft, or scheduled if a time is given."""
        fields = request.model_dump()
        fields["status"] = (
            NotificationLifecycle.SCHEDULED.value
            if request.scheduled_for
            else NotificationLifecycle.DRAFT.value
        )
        notification = self.notifications.create(
            sender_id=sender_id or SYSTEM_SENDER_ID, **fields
        )
        logger.info(
            "notification_created",
            notification_id=str(notification.id),
            channel=notification.channel,
            target_audience=notification.target_audience,
            status=notification.status,
        )
        return notification

    def update_notification(
        self, notification_id: UUID, request: NotificationUpdateRequest
    ) -> Notification:
        """Edit content or targeting of a draft.

        Raises:
            RecordNotFoundError: If the notification does not exist.
            ConflictError: If the notification is no longer a draft.
        """
        notification = self.notifications.get_by_id(notification_id)
        if notification.lifecycle is not NotificationLifecycle.DRAFT:
            raise ConflictError(
                "Only draft notifications can be edited",
                detail=f"Notification is '{notification.status}'",
            )

        fields = request.model_dump(exclude_unset=True, exclude_none=True)
        if fields:
            self.notifications.update(notification_id, **fields)
            logger.info(
                "notification_updated",
                notification_id=str(notification_id),
                fields=sorted(fields),
            )
        return self.notifications.get_by_id(notification_id)

    def delete_notification(self, notification_id: UUID) -> None:
        """Delete a notification in any status."""
        self.notifications.delete(notification_id)
        logger.info("notification_deleted", notification_id=str(notification_id))

    def schedule_notification(
        self, notification_id: UUID, scheduled_for: datetime
    ) -> Notification:
        """Schedule a draft, or move the time of an already scheduled one.

        Raises:
            RecordNotFoundError: If the notification does not exist.
            ConflictError: If the notification is sending, sent or failed.
        """
        notification = self.notifications.get_by_id(notification_id)
        self._require_transition(notification, NotificationLifecycle.SCHEDULED)
        self.notifications.set_status(
            notification_id, NotificationLifecycle.SCHEDULED, scheduled_for=scheduled_for
        )
        logger.info(
            "notification_scheduled",
            notification_id=str(notification_id),
            scheduled_for=scheduled_for.isoformat(),
        )
        return self.notifications.get_by_id(notification_id)

    def cancel_schedule(self, notification_id: UUID) -> Notification:
        """Return a scheduled notification to draft.

        Raises:
            RecordNotFoundError: If the notification does not exist.
            ConflictError: If the notification is not scheduled.
        """
        notification = self.notifications.get_by_id(notification_id)
        if notification.lifecycle is not NotificationLifecycle.SCHEDULED:
            raise ConflictError(
                "Only scheduled notifications can be cancelled",
                detail=f"Notification is '{notification.status}'",
            )
        self.notifications.set_status(
            notification_id, NotificationLifecycle.DRAFT, scheduled_for=None
        )
        logger.info("notification_schedule_cancelled", notification_id=str(notification_id))
        return self.notifications.get_by_id(notification_id)

    def send_notification(self, notification_id: UUID, feedback: Feedback) -> SendOutcome:
        """Run the send pipeline for one notification.

        Never raises: a missing notification, a disallowed status and any
        error inside the pipeline are all reported through ``feedback`` and
        the returned outcome. Errors inside the pipeline leave the
        notification ``failed``.
        """
        try:
            notification = self.notifications.get_by_id(notification_id)
        except RecordNotFoundError:
            message = "Notification not found"
            feedback.error(message)
            return SendOutcome(success=False, message=message, found=False)

        if not self._can_transition(notification, NotificationLifecycle.SENDING):
            message = f"A notification in status '{notification.status}' cannot be sent"
            logger.warning(
                "notification_send_rejected",
                notification_id=str(notification_id),
                status=notification.status,
            )
            feedback.error(message)
            return SendOutcome(
                success=False, message=message, final_status=notification.lifecycle
            )

        try:
            self.accountant.mark_sending(notification_id)
            recipients = self.resolver.resolve(
                notification.target_audience,
                notification.channel,
                notification.specific_users,
            )
            result = self.dispatcher.dispatch(notification, recipients)
            final_status = self.accountant.finalize(notification_id, result)
        except Exception:
            logger.exception("notification_send_failed", notification_id=str(notification_id))
            self.accountant.mark_failed(notification_id)
            feedback.error(SEND_FAILED_MESSAGE)
            return SendOutcome(
                success=False,
                message=SEND_FAILED_MESSAGE,
                dispatched=True,
                final_status=NotificationLifecycle.FAILED,
            )

        if result.success:
            feedback.success(f"Notification sent to {result.attempted_count} recipients")
        else:
            feedback.error(f"Notification could not be sent: {result.message}")

        return SendOutcome(
            success=result.success,
            message=result.message,
            recipient_count=result.attempted_count if result.success else 0,
            dispatched=True,
            final_status=final_status,
        )

    def send_due_notifications(
        self, feedback: Feedback, now: datetime | None = None
    ) -> list[SendOutcome]:
        """Send every scheduled notification whose time has passed."""
        due = list(self.notifications.due_scheduled(now or timezone.now()))
        logger.info("scheduled_notifications_due", count=len(due))
        return [self.send_notification(notification.id, feedback) for notification in due]

    def track_open(self, notification_id: UUID) -> None:
        self.accountant.track_open(notification_id)

    def track_click(self, notification_id: UUID) -> None:
        self.accountant.track_click(notification_id)

    def get_stats(self) -> NotificationStats:
        """Aggregate counts and engagement rates for the dashboard."""
        totals = self.notifications.totals()
        by_status = {
            row["status"]: row["count"] for row in self.notifications.count_by("status")
        }

        return NotificationStats(
            total=totals["total"],
            draft=by_status.get(NotificationLifecycle.DRAFT.value, 0),
            scheduled=by_status.get(NotificationLifecycle.SCHEDULED.value, 0),
            sending=by_status.get(NotificationLifecycle.SENDING.value, 0),
            sent=by_status.get(NotificationLifecycle.SENT.value, 0),
            failed=by_status.get(NotificationLifecycle.FAILED.value, 0),
            total_recipients=totals["recipients"],
            total_opens=totals["opens"],
            total_clicks=totals["clicks"],
            open_rate=_percent(totals["opens"], totals["recipients"]),
            click_rate=_percent(totals["clicks"], totals["opens"]),
            by_channel=self._breakdown("channel"),
            by_type=self._breakdown("notification_type"),
        )

    def _breakdown(self, field: str) -> dict[str, DeliveryBreakdown]:
        breakdown: dict[str, DeliveryBreakdown] = {}
        for row in self.notifications.count_by(field, "status"):
            entry = breakdown.setdefault(row[field], DeliveryBreakdown())
            entry.total += row["count"]
            if row["status"] == NotificationLifecycle.SENT.value:
                entry.sent += row["count"]
            elif row["status"] == NotificationLifecycle.FAILED.value:
                entry.failed += row["count"]
        return breakdown

    @staticmethod
    def _can_transition(notification: Notification, target: NotificationLifecycle) -> bool:
        current = notification.lifecycle
        return current is not None and current.can_transition_to(target)

    def _require_transition(
        self, notification: Notification, target: NotificationLifecycle
    ) -> None:
        if not self._can_transition(notification, target):
            raise ConflictError(
                f"Cannot move a '{notification.status}' notification to '{target.value}'",
                detail=f"Notification is '{notification.status}'",
            )


notification_service = NotificationService()
