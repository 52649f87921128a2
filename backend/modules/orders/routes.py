"""
Order API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_order_service
from api.middleware.auth import get_current_profile
from modules.users.models import UserProfile

from .interfaces import IOrderService
from .models import Order, OrderSubmission

router = APIRouter()


@router.post("", response_model=Order, status_code=201)
async def create_order(
    submission: OrderSubmission,
    profile: UserProfile = Depends(get_current_profile),
    service: IOrderService = Depends(get_order_service),
) -> Order:
    """
    Submit a new order.

    The order is created in 'pending' status. Returns 400 with one entry
    per offending field if the submission is rejected.
    """
    return await service.create_order(profile, submission)


@router.get("", response_model=list[Order])
async def list_orders(
    profile: UserProfile = Depends(get_current_profile),
    service: IOrderService = Depends(get_order_service),
) -> list[Order]:
    """
    List the caller's orders, most recent first.
    """
    return await service.list_orders(profile)
