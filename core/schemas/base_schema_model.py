"""Shared pydantic configuration for request, response and pipeline schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base for every schema in the admin service.

    The dashboard may send camelCase or snake_case keys; responses are
    dumped by field name. Enum fields hold their string values so pipeline
    results compare equal to the stored column values, and schemas can be
    validated straight from model instances.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
