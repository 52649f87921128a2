"""
Bearer authentication dependencies.

Extracts the bearer credential, verifies it through the auth service and,
for user-scoped routes, syncs the caller's profile.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from modules.users.interfaces import IUserService
from modules.users.models import UserProfile
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_user_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a verified caller.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError("Missing authorization header")

    return await auth.validate_token(credentials.credentials)


async def get_current_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Dependency that requires authentication and returns the stored profile.

    The profile is created on the caller's first request and its
    last_login refreshed on every later one, in a single operation.
    """
    return await users.sync_profile(user)

