"""Database models for core application."""

from core.models.content import HelpRequest, Pet
from core.models.notification import Notification, UserNotification
from core.models.profile import Profile, UserMembership
from core.models.report import Report

__all__ = [
    "HelpRequest",
    "Notification",
    "Pet",
    "Profile",
    "Report",
    "UserMembership",
    "UserNotification",
]
