"""
Orders module interface.

The API layer depends on IOrderService for all order operations.
"""

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from modules.users.models import UserProfile

from .models import Order, OrderSubmission


@runtime_checkable
class IOrderService(Protocol):
    """
    Interface for order operations.
    """

    async def create_order(
        self,
        profile: UserProfile,
        submission: OrderSubmission,
        today: Optional[date] = None,
    ) -> Order:
        """
        Validate and store a new order.

        The order is created in PENDING status. Nothing is written if
        validation fails.

        Args:
            profile: Owner of the order
            submission: Raw order payload
            today: Current local date; defaults to today in the delivery timezone

        Returns:
            The created order

        Raises:
            OrderValidationError: If the submission breaks any rule
        """
        ...

    async def list_orders(self, profile: UserProfile) -> list[Order]:
        """
        List the owner's orders, newest first.
        """
        ...
