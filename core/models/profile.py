"""Profile and membership models (hosted backend tables)."""

import uuid
from typing import ClassVar

from django.db import models


class Profile(models.Model):
    """Community member profile matching the ``profiles`` table.

    Unmanaged: the hosted backend owns the schema. ``fcm_token`` is the
    device token used for push delivery.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, null=True, blank=True)
    full_name = models.CharField(max_length=255, null=True, blank=True)
    phone = models.CharField(max_length=32, null=True, blank=True)
    fcm_token = models.TextField(null=True, blank=True)
    notifications_enabled = models.BooleanField(default=True)
    is_admin = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    suspended = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "profiles"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of profile."""
        return f"{self.full_name or 'Unnamed'} ({self.email})"


class UserMembership(models.Model):
    """Paid membership of a profile, matching ``user_memberships``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        Profile,
        on_delete=models.CASCADE,
        related_name="memberships",
        db_column="user_id",
    )
    membership_type_id = models.UUIDField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_memberships"
        managed = False

    def __str__(self) -> str:
        """Return string representation of membership."""
        state = "active" if self.is_active else "inactive"
        return f"Membership {self.id} ({state}) for {self.user_id}"
