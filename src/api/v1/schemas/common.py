"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ErrorResponse(BaseModel):
    """Standardized error response.

    Field-keyed messages (``handle``, ``noprofile``, ...) are added at the
    top level next to these keys.
    """

    model_config = ConfigDict(extra="allow")

    error_code: str
    message: str
    details: Any | None = None


class SuccessResponse(BaseModel):
    """Acknowledgement for operations without a body."""

    success: bool = True
