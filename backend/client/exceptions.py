"""
Client exceptions.
"""

from typing import Any, Optional


class ClientError(Exception):
    """Base exception for client-side failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionExpiredError(ClientError):
    """
    The API rejected the stored credential.

    The session has already been cleared; the user must sign in again.
    """

    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(message)


class APIError(ClientError):
    """
    A request failed.

    ``status_code`` is 0 when the API could not be reached at all.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[list[dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details or []

    def field_errors(self) -> dict[str, str]:
        """First message per field, for highlighting form inputs."""
        errors: dict[str, str] = {}
        for detail in self.details:
            field = detail.get("field")
            if field and field not in errors:
                errors[field] = detail.get("message", "")
        return errors
