"""Admin notification models.

``Notification`` is the campaign an administrator composes and sends;
``UserNotification`` is the per-recipient record created when a campaign is
delivered through the ``in_app`` or ``push`` channel. The apps read
``user_notifications`` directly, and a new ``push`` row is what triggers
device delivery.
"""

import uuid
from typing import ClassVar

from django.db import models

from core.constants import SYSTEM_SENDER_ID
from core.enums import (
    Channel,
    DeliveryStatus,
    NotificationKind,
    NotificationLifecycle,
    TargetAudience,
)


def _choices(enum_cls) -> list[tuple[str, str]]:
    return [(member.value, member.value) for member in enum_cls]


class Notification(models.Model):
    """Outbound communication composed in the admin dashboard.

    Attributes:
        id: Unique identifier.
        sender_id: Admin who created it, or SYSTEM_SENDER_ID.
        title: Headline shown to recipients.
        message: Body text.
        notification_type: Logical type (info, success, warning, error, promotional).
        channel: Delivery medium (email, push, sms, in_app).
        target_audience: Symbolic recipient group.
        specific_users: Explicit recipients (emails or profile ids) for
            the ``specific`` audience.
        status: Lifecycle status, see NotificationLifecycle.
        scheduled_for: Advisory send time for scheduled notifications.
        sent_at: Set only when a send succeeds.
        recipient_count: Recipients the last successful send attempted.
        open_count: Opens reported by the apps (not deduplicated).
        click_count: Clicks reported by the apps (not deduplicated).
        metadata: Free-form extra data.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sender_id = models.UUIDField(default=SYSTEM_SENDER_ID)
    title = models.CharField(max_length=255)
    message = models.TextField()
    notification_type = models.CharField(
        max_length=20,
        choices=_choices(NotificationKind),
        default=NotificationKind.INFO.value,
    )
    channel = models.CharField(
        max_length=20,
        choices=_choices(Channel),
        default=Channel.IN_APP.value,
    )
    target_audience = models.CharField(
        max_length=20,
        choices=_choices(TargetAudience),
        default=TargetAudience.ALL.value,
    )
    specific_users = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=20,
        choices=_choices(NotificationLifecycle),
        default=NotificationLifecycle.DRAFT.value,
    )
    scheduled_for = models.DateTimeField(null=True, blank=True)
    sent_at = models.DateTimeField(null=True, blank=True)
    recipient_count = models.PositiveIntegerField(default=0)
    open_count = models.PositiveIntegerField(default=0)
    click_count = models.PositiveIntegerField(default=0)
    metadata = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["status", "-created_at"]),
            models.Index(fields=["status", "scheduled_for"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.title} [{self.channel}/{self.status}]"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.id}, channel={self.channel}, "
            f"audience={self.target_audience}, status={self.status})>"
        )

    @property
    def lifecycle(self) -> NotificationLifecycle | None:
        """Status as an enum member, or None for a value written elsewhere."""
        try:
            return NotificationLifecycle(self.status)
        except ValueError:
            return None


class UserNotification(models.Model):
    """Per-recipient copy of an admin notification.

    The primary key is derived from (source notification, user), so creating
    the same delivery twice resolves to the same row.
    """

    id = models.UUIDField(primary_key=True, editable=False)
    user = models.ForeignKey(
        "core.Profile",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="user_id",
    )
    source_notification = models.ForeignKey(
        Notification,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="deliveries",
        db_column="source_notification_id",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    notification_type = models.CharField(max_length=20, choices=_choices(NotificationKind))
    channel = models.CharField(max_length=20, choices=_choices(Channel))
    metadata = models.JSONField(default=dict, blank=True)
    is_read = models.BooleanField(default=False, db_column="read")
    delivery_status = models.CharField(
        max_length=20,
        choices=_choices(DeliveryStatus),
        default=DeliveryStatus.PENDING.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_notifications"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["user", "is_read", "-created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of the delivery record."""
        return f"{self.title} for user {self.user_id}"
