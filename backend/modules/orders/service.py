"""
Orders service implementation.

Runs the validator and writes through the repository.
"""

import logging
from datetime import date
from typing import Optional

from modules.users.models import UserProfile

from .interfaces import IOrderService
from .lifecycle import INITIAL_STATUS
from .models import Order, OrderSubmission
from .repository import OrderRepository
from .validation import OrderValidator

logger = logging.getLogger(__name__)


class OrderService(IOrderService):
    """
    Order service with Supabase backend.

    Submissions are not de-duplicated: two identical submissions produce
    two orders.
    """

    def __init__(self, repository: OrderRepository, validator: OrderValidator):
        self._repository = repository
        self._validator = validator

    async def create_order(
        self,
        profile: UserProfile,
        submission: OrderSubmission,
        today: Optional[date] = None,
    ) -> Order:
        if today is None:
            today = self._validator.policy.today()

        validated = self._validator.validate(submission, today)

        data = {
            "user_id": profile.id,
            "username": profile.username,
            "purchase_date": validated.purchase_date.isoformat(),
            "delivery_time": validated.delivery_time,
            "delivery_location": validated.delivery_location,
            "product_name": validated.product_name,
            "quantity": validated.quantity,
            "message": validated.message,
            "status": INITIAL_STATUS.value,
        }
        order = self._repository.create_order(data)
        logger.info(
            f"Created order {order.id} for user {profile.id}: "
            f"{order.quantity} x {order.product_name} on {order.purchase_date}"
        )
        return order

    async def list_orders(self, profile: UserProfile) -> list[Order]:
        return self._repository.list_for_user(profile.id)
