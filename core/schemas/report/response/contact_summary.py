"""Schema for a reporter or reviewer summary."""

from core.schemas.base_schema_model import BaseSchemaModel


class ContactSummary(BaseSchemaModel):
    """Name and email of a profile referenced by a report."""

    full_name: str | None = None
    email: str | None = None
