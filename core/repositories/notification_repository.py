"""Record store for admin notifications."""

from datetime import datetime
from typing import Any
from uuid import UUID

from django.db.models import Count, F, QuerySet, Sum

from core.enums import NotificationLifecycle
from core.exceptions import RecordNotFoundError
from core.models import Notification
from core.repositories.record_store import RecordStore

COUNTER_FIELDS = frozenset({"open_count", "click_count"})


class NotificationRepository(RecordStore[Notification]):
    """Queries and updates on the ``notifications`` table."""

    model = Notification
    entity_name = "notification"

    def set_status(
        self, notification_id: UUID, status: NotificationLifecycle, **fields: Any
    ) -> None:
        """Move a notification to ``status``, optionally writing more fields."""
        self.update(notification_id, status=status.value, **fields)

    def increment_counter(self, notification_id: UUID, field: str) -> None:
        """Add 1 to an engagement counter.

        The increment happens in the database (``F() + 1``) so concurrent
        reports are never lost.

        Raises:
            ValueError: If ``field`` is not an engagement counter.
            RecordNotFoundError: If the notification does not exist.
        """
        if field not in COUNTER_FIELDS:
            raise ValueError(f"Not an engagement counter: {field}")
        updated = Notification.objects.filter(pk=notification_id).update(
            **{field: F(field) + 1}
        )
        if not updated:
            raise RecordNotFoundError(self.entity_name, notification_id)

    def due_scheduled(self, now: datetime) -> QuerySet[Notification]:
        """Scheduled notifications whose send time has passed, oldest first."""
        return Notification.objects.filter(
            status=NotificationLifecycle.SCHEDULED.value,
            scheduled_for__lte=now,
        ).order_by("scheduled_for")

    def totals(self) -> dict[str, int]:
        """Summed recipient, open and click counters across all notifications."""
        aggregate = Notification.objects.aggregate(
            total=Count("id"),
            recipients=Sum("recipient_count"),
            opens=Sum("open_count"),
            clicks=Sum("click_count"),
        )
        return {key: value or 0 for key, value in aggregate.items()}

    def count_by(self, *fields: str) -> list[dict[str, Any]]:
        """Row counts grouped by the given columns."""
        return list(
            Notification.objects.order_by()
            .values(*fields)
            .annotate(count=Count("id"))
        )
