"""
Order repository for database access.

Encapsulates all Supabase queries and data mapping for the orders table.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Order, OrderStatus


class OrderRepository(BaseRepository[Order]):
    """
    Repository for order data access.

    Note: This repository does NOT validate orders or check ownership.
    The service layer validates submissions and always scopes reads to
    the caller's profile.
    """

    def create_order(self, data: dict[str, Any]) -> Order:
        """
        Insert an order.

        Args:
            data: Column values (user_id, username, purchase_date, ...)

        Returns:
            Created Order with generated ID and timestamp.
        """
        result = self._execute(self._db.table("orders").insert(data), "create order")
        return self._map_to_order(result.data[0])

    def list_for_user(self, user_id: str) -> list[Order]:
        """
        List a user's orders, newest first.

        Returns:
            The orders, or an empty list if the user has none.
        """
        query = (
            self._db.table("orders")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        result = self._execute(query, "list orders")
        return [self._map_to_order(row) for row in result.data or []]

    def _map_to_order(self, data: dict[str, Any]) -> Order:
        """Map database row to Order model."""
        return Order(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            username=data["username"],
            purchase_date=data["purchase_date"],
            delivery_time=data["delivery_time"],
            delivery_location=data["delivery_location"],
            product_name=data["product_name"],
            quantity=data["quantity"],
            message=data.get("message"),
            status=OrderStatus(data.get("status") or OrderStatus.PENDING.value),
            created_at=data["created_at"],
        )
