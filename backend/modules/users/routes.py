"""
User profile endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_profile, get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UserProfile, UpdateProfileRequest

router = APIRouter()


@router.get("/profile", response_model=UserProfile)
async def get_profile(
    profile: UserProfile = Depends(get_current_profile),
) -> UserProfile:
    """
    Get the caller's profile.

    The profile is created on the caller's first authenticated request.
    """
    return profile


@router.put("/profile", response_model=UserProfile)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Update the caller's contact number and country.

    Returns 404 if the caller has no profile yet.
    """
    return await service.update_profile(user.id, request)
