"""API models package."""

from .errors import ErrorResponse, ValidationErrorDetail, ValidationErrorResponse

__all__ = [
    "ErrorResponse",
    "ValidationErrorDetail",
    "ValidationErrorResponse",
]
