"""Shared pydantic helpers for request and response schemas.

Wire payloads use camelCase keys (``userId``, ``unitPrice``); the Python
side uses snake_case. ``CamelModel`` bridges both.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import BadRequest

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base model accepting both camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


def parse_payload(schema: type[SchemaT], data: Any) -> SchemaT:
    """Validate ``data`` against ``schema`` or raise ``BadRequest``.

    Args:
        schema: Pydantic model class describing the expected payload.
        data: Parsed request body.

    Returns:
        The validated model instance.

    Raises:
        BadRequest: When validation fails; the detail is the pydantic
            error summary.
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise BadRequest(str(e)) from e


def parse_int_param(value: str | None, name: str) -> int | None:
    """Parse an optional positive integer query parameter.

    Returns None when the parameter is absent or empty.

    Raises:
        BadRequest: When the value is not a positive integer.
    """
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise BadRequest(f"Validation failed ({name} must be a numeric string)")
    if parsed <= 0:
        raise BadRequest(f"{name} must be a positive number")
    return parsed
