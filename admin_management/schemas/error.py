"""Error body schema."""

from typing import Any

from pydantic import BaseModel, Field

from admin_management.domain.exceptions import AdminManagementException


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


def to_error_response(exc: AdminManagementException) -> ErrorResponse:
    return ErrorResponse(**exc.to_dict())
