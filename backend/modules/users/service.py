"""
User directory service.

Bridges verified identities to stored profiles.
"""

import logging

from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UserProfile, UpdateProfileRequest
from .repository import UserRepository
from .exceptions import ProfileNotFoundError

logger = logging.getLogger(__name__)


def profile_defaults(user: AuthenticatedUser) -> dict[str, str]:
    """
    Derive profile fields from token claims.

    username prefers the nickname, name prefers the full name; both fall
    back through the other claims and finally the subject identifier.
    """
    username = user.nickname or user.email or user.name or user.id
    name = user.name or user.nickname or user.email or user.id
    return {
        "username": username,
        "name": name,
        "email": user.email or "",
    }


class UserService(IUserService):
    """
    User directory backed by the users table.
    """

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def sync_profile(self, user: AuthenticatedUser) -> UserProfile:
        defaults = profile_defaults(user)
        profile = self._repository.sync_profile(
            subject_id=user.id,
            username=defaults["username"],
            name=defaults["name"],
            email=defaults["email"],
        )
        logger.debug(f"Synced profile {profile.id} for subject {user.id}")
        return profile

    async def update_profile(
        self,
        subject_id: str,
        request: UpdateProfileRequest,
    ) -> UserProfile:
        profile = self._repository.update_contact(subject_id, request.changes())
        if profile is None:
            raise ProfileNotFoundError(subject_id)
        logger.info(f"Updated profile {profile.id}")
        return profile
