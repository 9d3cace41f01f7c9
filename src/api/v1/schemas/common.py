"""Schemas shared by every profile endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FieldErrorDetail(BaseModel):
    """One failed field in a VALIDATION_ERROR response."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response.

    ``details`` is a list of FieldErrorDetail for validation failures and
    a small object (or null) otherwise.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": [{"field": "status", "message": "Status is required"}],
            }
        },
    )

    error_code: str
    message: str
    details: list[FieldErrorDetail] | dict[str, Any] | None = None


class MessageResponse(BaseModel):
    """Confirmation returned by operations that have no resource to show."""

    message: str
