"""
Base exception classes for the OrderDesk backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class OrderDeskError(Exception):
    """
    Base exception for all OrderDesk errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and internal APIs."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(OrderDeskError):
    """Resource not found."""

    pass


class ValidationError(OrderDeskError):
    """
    Input validation failed.

    ``issues`` carries every offending field so the caller can report
    them all at once.
    """

    def __init__(
        self,
        message: str,
        issues: Optional[list[dict[str, Any]]] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.issues = issues or []


class AuthenticationError(OrderDeskError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(OrderDeskError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(OrderDeskError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
