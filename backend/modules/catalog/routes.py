"""
Options catalog endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .models import CatalogOptions
from .service import CatalogService

router = APIRouter()


@router.get("", response_model=CatalogOptions)
async def get_options(
    user: AuthenticatedUser = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogOptions:
    """
    Get the delivery time slots, locations and products.

    Requires a verified caller but does not touch the caller's profile.
    """
    return service.get_options()
