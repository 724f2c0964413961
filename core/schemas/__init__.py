"""Schemas for the core app."""

from core.schemas.dispatch import (
    DeliveryResult,
    Recipient,
    SendOutcome,
    TransportResult,
)
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.notification import (
    NotificationCreateRequest,
    NotificationDetail,
    NotificationScheduleRequest,
    NotificationStats,
    NotificationUpdateRequest,
)
from core.schemas.report import (
    ModerationRequest,
    ModerationResult,
    ReportDetail,
    ReportStats,
    ReportStatusUpdateRequest,
)

__all__ = [
    "DeliveryResult",
    "DependencyHealth",
    "LivenessResponse",
    "ModerationRequest",
    "ModerationResult",
    "NotificationCreateRequest",
    "NotificationDetail",
    "NotificationScheduleRequest",
    "NotificationStats",
    "NotificationUpdateRequest",
    "ReadinessResponse",
    "Recipient",
    "ReportDetail",
    "ReportStats",
    "ReportStatusUpdateRequest",
    "SendOutcome",
    "TransportResult",
]
