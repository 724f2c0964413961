"""Enumerations for the core app."""

from core.enums.health import HealthStatus
from core.enums.notification import (
    LIFECYCLE_TRANSITIONS,
    Channel,
    DeliveryStatus,
    NotificationKind,
    NotificationLifecycle,
    TargetAudience,
)
from core.enums.report import (
    HelpRequestState,
    ModerationAction,
    ReportReason,
    ReportStatus,
    ReportType,
)

__all__ = [
    "LIFECYCLE_TRANSITIONS",
    "Channel",
    "DeliveryStatus",
    "HealthStatus",
    "HelpRequestState",
    "ModerationAction",
    "NotificationKind",
    "NotificationLifecycle",
    "ReportReason",
    "ReportStatus",
    "ReportType",
    "TargetAudience",
]
