"""Recipient schema."""

from uuid import UUID

from pydantic import Field

from core.models import Profile
from core.schemas.base_schema_model import BaseSchemaModel


class Recipient(BaseSchemaModel):
    """A resolved delivery target. Computed from a profile, never stored."""

    id: UUID = Field(..., description="Profile ID")
    email: str | None = Field(None, description="Email address")
    phone: str | None = Field(None, description="Phone number")
    push_token: str | None = Field(None, description="Device push token")
    notifications_enabled: bool = Field(
        default=True, description="Whether the user accepts notifications"
    )

    @classmethod
    def from_profile(cls, profile: Profile) -> "Recipient":
        """Build a recipient from a profile row."""
        return cls(
            id=profile.id,
            email=profile.email or None,
            phone=profile.phone or None,
            push_token=profile.fcm_token or None,
            notifications_enabled=profile.notifications_enabled,
        )
