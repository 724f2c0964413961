"""Notification-related enumerations.

Values are the wire/storage strings used by the hosted backend and the
admin dashboard.
"""

from enum import Enum


class Channel(str, Enum):
    """Delivery medium of an admin notification."""

    EMAIL = "email"
    PUSH = "push"
    SMS = "sms"
    IN_APP = "in_app"

    @property
    def creates_user_records(self) -> bool:
        """Whether delivery persists one record per recipient."""
        return self in (Channel.IN_APP, Channel.PUSH)


class TargetAudience(str, Enum):
    """Symbolic recipient group of an admin notification."""

    ALL = "all"
    USERS = "users"
    PREMIUM_USERS = "premium_users"
    SPECIFIC = "specific"


class NotificationKind(str, Enum):
    """Logical type shown to the end user (icon and color in the apps)."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    PROMOTIONAL = "promotional"


class NotificationLifecycle(str, Enum):
    """Lifecycle status of an admin notification.

    ``sent`` and ``failed`` are terminal. The only backwards move is
    cancelling a schedule (``scheduled -> draft``).
    """

    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENDING = "sending"
    SENT = "sent"
    FAILED = "failed"

    def can_transition_to(self, target: "NotificationLifecycle") -> bool:
        """Check a transition against the lifecycle state machine."""
        return target in LIFECYCLE_TRANSITIONS[self]


LIFECYCLE_TRANSITIONS: dict[NotificationLifecycle, frozenset[NotificationLifecycle]] = {
    NotificationLifecycle.DRAFT: frozenset(
        {NotificationLifecycle.SCHEDULED, NotificationLifecycle.SENDING}
    ),
    NotificationLifecycle.SCHEDULED: frozenset(
        {
            NotificationLifecycle.SCHEDULED,
            NotificationLifecycle.DRAFT,
            NotificationLifecycle.SENDING,
        }
    ),
    NotificationLifecycle.SENDING: frozenset(
        {NotificationLifecycle.SENT, NotificationLifecycle.FAILED}
    ),
    NotificationLifecycle.SENT: frozenset(),
    NotificationLifecycle.FAILED: frozenset(),
}


class DeliveryStatus(str, Enum):
    """Push transport outcome of a per-recipient record."""

    PENDING = "pending"
    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"
