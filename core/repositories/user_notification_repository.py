"""Record store for per-recipient notification records."""

import uuid
from uuid import UUID

from core.constants import USER_NOTIFICATION_NAMESPACE
from core.enums import DeliveryStatus
from core.models import Notification, UserNotification
from core.repositories.record_store import RecordStore


class UserNotificationRepository(RecordStore[UserNotification]):
    """Creates and tracks ``user_notifications`` rows."""

    model = UserNotification
    entity_name = "user notification"

    @staticmethod
    def dedup_key(notification_id: UUID, user_id: UUID) -> UUID:
        """Deterministic record id for one (notification, user) pair."""
        return uuid.uuid5(USER_NOTIFICATION_NAMESPACE, f"{notification_id}:{user_id}")

    def create_for_recipient(
        self, notification: Notification, user_id: UUID
    ) -> tuple[UserNotification, bool]:
        """Create the recipient's copy of ``notification`` unless it exists.

        Returns:
            Tuple of (record, created). ``created`` is False when an earlier
            dispatch already wrote the record.
        """
        return UserNotification.objects.get_or_create(
            id=self.dedup_key(notification.id, user_id),
            defaults={
                "user_id": user_id,
                "source_notification_id": notification.id,
                "title": notification.title,
                "message": notification.message,
                "notification_type": notification.notification_type,
                "channel": notification.channel,
                "metadata": {
                    "from_admin": True,
                    "original_notification_id": str(notification.id),
                },
                "is_read": False,
            },
        )

    def set_delivery_status(self, record_id: UUID, status: DeliveryStatus) -> None:
        """Record the push transport outcome."""
        self.update(record_id, delivery_status=status.value)

