"""
User directory interface.

The API layer depends on IUserService for everything profile-related.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import UserProfile, UpdateProfileRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for the user directory.
    """

    async def sync_profile(self, user: AuthenticatedUser) -> UserProfile:
        """
        Create the caller's profile on first sight, otherwise refresh last_login.

        Runs as one database operation so concurrent first requests from
        the same subject cannot create two profiles.

        Args:
            user: Verified caller identity

        Returns:
            The stored profile
        """
        ...

    async def update_profile(
        self,
        subject_id: str,
        request: UpdateProfileRequest,
    ) -> UserProfile:
        """
        Update the mutable contact fields.

        Raises:
            ProfileNotFoundError: If no profile exists for the subject
        """
        ...
