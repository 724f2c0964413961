"""Constants package for core application."""

from core.constants.dispatch import (
    PET_SUSPENSION_REASON,
    SYSTEM_SENDER_ID,
    USER_NOTIFICATION_NAMESPACE,
)
from core.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SLOW_REQUEST_THRESHOLD,
)

__all__ = [
    "PET_SUSPENSION_REASON",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SLOW_REQUEST_THRESHOLD",
    "SYSTEM_SENDER_ID",
    "USER_NOTIFICATION_NAMESPACE",
]
