"""Notification schemas."""

from core.schemas.notification.request.notification_create_request import (
    NotificationCreateRequest,
)
from core.schemas.notification.request.notification_schedule_request import (
    NotificationScheduleRequest,
)
from core.schemas.notification.request.notification_update_request import (
    NotificationUpdateRequest,
)
from core.schemas.notification.response.delivery_breakdown import DeliveryBreakdown
from core.schemas.notification.response.notification_detail import (
    NotificationDetail,
)
from core.schemas.notification.response.notification_stats import NotificationStats

__all__ = [
    "DeliveryBreakdown",
    "NotificationCreateRequest",
    "NotificationDetail",
    "NotificationScheduleRequest",
    "NotificationStats",
    "NotificationUpdateRequest",
]
