"""
User directory exceptions.
"""

from shared.exceptions import NotFoundError


class ProfileNotFoundError(NotFoundError):
    """Raised when no profile exists for a subject identifier."""

    def __init__(self, subject_id: str):
        super().__init__(
            "User not found",
            code="PROFILE_NOT_FOUND",
            details={"subject_id": subject_id},
        )
