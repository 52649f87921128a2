"""
Error response models.

Standardized error envelope for the API: ``{"error": ...}``, plus
``details`` for validation failures.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str


class ValidationErrorDetail(BaseModel):
    """One offending field."""

    field: str
    message: str
    code: str


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "Validation failed"
    details: list[ValidationErrorDetail]
