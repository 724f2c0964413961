"""Generic record store over a Django model."""

from typing import Any, ClassVar, Generic, TypeVar

from django.db import models
from django.db.models import QuerySet
from django.utils import timezone

from core.exceptions import RecordNotFoundError

ModelT = TypeVar("ModelT", bound=models.Model)


class RecordStore(Generic[ModelT]):
    """Uniform get/create/update/delete access to one table.

    Subclasses set ``model`` and ``entity_name``. Lookups that match no row
    raise RecordNotFoundError instead of ``Model.DoesNotExist`` so callers
    only deal with one not-found type.
    """

    model: ClassVar[type[models.Model]]
    entity_name: ClassVar[str]

    def get_all(self) -> QuerySet[ModelT]:
        """Return every record in the model's default ordering."""
        return self.model.objects.all()

    def get_by_id(self, record_id: Any) -> ModelT:
        """Fetch a single record.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        try:
            return self.model.objects.get(pk=record_id)
        except self.model.DoesNotExist as e:
            raise RecordNotFoundError(self.entity_name, record_id) from e

    def create(self, **fields: Any) -> ModelT:
        """Insert a record and return it."""
        return self.model.objects.create(**fields)

    def update(self, record_id: Any, **fields: Any) -> None:
        """Apply a partial update in a single UPDATE statement.

        ``updated_at`` is bumped when the table has one, since queryset
        updates bypass ``auto_now``.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        if self._has_field("updated_at"):
            fields.setdefault("updated_at", timezone.now())
        updated = self.model.objects.filter(pk=record_id).update(**fields)
        if not updated:
            raise RecordNotFoundError(self.entity_name, record_id)

    def delete(self, record_id: Any) -> None:
        """Hard-delete a record.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        deleted, _ = self.model.objects.filter(pk=record_id).delete()
        if not deleted:
            raise RecordNotFoundError(self.entity_name, record_id)

    def summary(self, record_id: Any, *fields: str) -> dict[str, Any] | None:
        """Selected columns of one record, or None when it does not exist."""
        if record_id is None:
            return None
        return self.model.objects.filter(pk=record_id).values(*fields).first()

    def _has_field(self, name: str) -> bool:
        return any(field.name == name for field in self.model._meta.concrete_fields)
