"""Status, counter and timestamp bookkeeping around a send."""

from uuid import UUID

from django.db import DatabaseError
from django.utils import timezone

import structlog

from core.enums import NotificationLifecycle
from core.exceptions import RecordNotFoundError
from core.repositories import NotificationRepository
from core.schemas.dispatch import DeliveryResult

logger = structlog.get_logger(__name__)


class DeliveryAccountant:
    """Writes the outcome of a send onto the notification row.

    Rows are updated without locking; concurrent writers follow
    last-write-wins, except the engagement counters which increment in the
    database.
    """

    def __init__(self, notifications: NotificationRepository | None = None) -> None:
        self.notifications = notifications or NotificationRepository()

    def mark_sending(self, notification_id: UUID) -> None:
        self.notifications.set_status(notification_id, NotificationLifecycle.SENDING)

    def finalize(
        self, notification_id: UUID, result: DeliveryResult
    ) -> NotificationLifecycle:
        """Record the dispatch result and return the final status.

        Success stamps ``sent_at`` and stores the attempted count as
        ``recipient_count``. Failure leaves ``sent_at`` empty and the count at
        zero. Engagement counters restart at zero either way.
        """
        if result.success:
            status = NotificationLifecycle.SENT
            fields = {"sent_at": timezone.now(), "recipient_count": result.attempted_count}
        else:
            status = NotificationLifecycle.FAILED
            fields = {"sent_at": None, "recipient_count": 0}

        self.notifications.set_status(
            notification_id, status, open_count=0, click_count=0, **fields
        )
        logger.info(
            "notification_finalized",
            notification_id=str(notification_id),
            status=status.value,
            recipient_count=fields["recipient_count"],
        )
        return status

    def mark_failed(self, notification_id: UUID) -> None:
        """Best-effort move to ``failed`` after an unexpected pipeline error.

        Storage errors here are logged and swallowed; the caller is already
        handling a failure.
        """
        try:
            self.notifications.set_status(
                notification_id,
                NotificationLifecycle.FAILED,
                sent_at=None,
                recipient_count=0,
                open_count=0,
                click_count=0,
            )
        except (DatabaseError, RecordNotFoundError) as e:
            logger.error(
                "notification_mark_failed_failed",
                notification_id=str(notification_id),
                error=str(e),
            )

    def track_open(self, notification_id: UUID) -> None:
        """Count one open. Not deduplicated by user and not capped."""
        self.notifications.increment_counter(notification_id, "open_count")
        logger.info("notification_open_tracked", notification_id=str(notification_id))

    def track_click(self, notification_id: UUID) -> None:
        """Count one click. Not deduplicated by user and not capped."""
        self.notifications.increment_counter(notification_id, "click_count")
        logger.info("notification_click_tracked", notification_id=str(notification_id))
