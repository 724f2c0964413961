"""Community content that can be moderated through reports."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import HelpRequestState


class Pet(models.Model):
    """Pet listed for matching ("petomatch"), table ``pets``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.UUIDField(null=True, blank=True)
    name = models.CharField(max_length=255)
    species = models.CharField(max_length=50, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    suspended_by_admin = models.BooleanField(default=False)
    suspension_reason = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "pets"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of pet."""
        return self.name


class HelpRequest(models.Model):
    """Help-network post ("aviso"), table ``red_de_ayuda``."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(null=True, blank=True)
    title = models.CharField(max_length=255, db_column="titulo")
    description = models.TextField(null=True, blank=True, db_column="descripcion")
    contact = models.CharField(max_length=255, null=True, blank=True, db_column="contacto")
    state = models.CharField(
        max_length=20,
        db_column="estado",
        choices=[(s.value, s.value) for s in HelpRequestState],
        default=HelpRequestState.ACTIVE.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "red_de_ayuda"
        managed = False
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of help request."""
        return f"{self.title} ({self.state})"
