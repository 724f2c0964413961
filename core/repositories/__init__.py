"""Record stores over the hosted backend's tables."""

from core.repositories.content_repository import HelpRequestRepository, PetRepository
from core.repositories.notification_repository import NotificationRepository
from core.repositories.profile_repository import ProfileRepository
from core.repositories.record_store import RecordStore
from core.repositories.report_repository import ReportRepository
from core.repositories.user_notification_repository import (
    UserNotificationRepository,
)

__all__ = [
    "HelpRequestRepository",
    "NotificationRepository",
    "PetRepository",
    "ProfileRepository",
    "RecordStore",
    "ReportRepository",
    "UserNotificationRepository",
]
