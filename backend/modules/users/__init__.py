"""
User directory module.

Maps identity-provider subjects to stored profiles.

Public API:
- IUserService: Interface for profile operations
- UserProfile, UpdateProfileRequest: Data models
- ProfileNotFoundError
"""

from .interfaces import IUserService
from .models import UserProfile, UpdateProfileRequest
from .exceptions import ProfileNotFoundError

__all__ = [
    "IUserService",
    "UserProfile",
    "UpdateProfileRequest",
    "ProfileNotFoundError",
]
