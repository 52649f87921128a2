"""
Client view state.

Every piece of view state is an immutable model. User actions are methods
that return the next state; nothing is mutated in place, so the same state
can be rendered, compared or replayed safely.
"""

import calendar
from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict

from modules.catalog.models import CatalogOptions
from modules.orders.lifecycle import status_rank
from modules.orders.models import Order, OrderStatus
from modules.users.models import UserProfile

FORM_FIELDS = (
    "purchase_date",
    "delivery_time",
    "delivery_location",
    "product_name",
    "quantity",
    "message",
)


class _State(BaseModel):
    model_config = ConfigDict(frozen=True)


class OrderFormState(_State):
    """The new-order form."""

    purchase_date: str = ""
    delivery_time: str = ""
    delivery_location: str = ""
    product_name: str = ""
    quantity: int = 1
    message: str = ""

    phase: Literal["idle", "submitting", "failed", "succeeded"] = "idle"
    error: Optional[str] = None
    field_errors: dict[str, str] = {}
    success: Optional[str] = None

    def with_field(self, name: str, value: Any) -> "OrderFormState":
        """
        Update one input.

        Quantity is coerced to an integer; anything that is not a non-zero
        integer becomes 1.
        """
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        if name == "quantity":
            try:
                value = int(value) or 1
            except (TypeError, ValueError):
                value = 1
        return self.model_copy(update={name: value})

    def precheck(self, today: date, non_delivery_weekday: int) -> Optional[str]:
        """
        Early feedback on the date before submitting.

        The server repeats these checks authoritatively; an unparseable date
        is left for the server to reject.
        """
        try:
            selected = date.fromisoformat(self.purchase_date)
        except ValueError:
            return None
        if selected.weekday() == non_delivery_weekday:
            day_name = calendar.day_name[non_delivery_weekday]
            return f"Delivery is not available on {day_name}s. Please select another date."
        if selected < today:
            return "Purchase date cannot be in the past."
        return None

    def check_slot(self, delivery_times: list[str]) -> Optional[str]:
        """Early feedback on the delivery time, against the loaded options."""
        if self.delivery_time not in delivery_times:
            return f"Please select one of the delivery times: {', '.join(delivery_times)}."
        return None

    def submitting(self) -> "OrderFormState":
        return self.model_copy(update={
            "phase": "submitting",
            "error": None,
            "field_errors": {},
            "success": None,
        })

    def failed(self, message: str, field_errors: Optional[dict[str, str]] = None) -> "OrderFormState":
        """Show the failure inline; entered data stays as it was."""
        return self.model_copy(update={
            "phase": "failed",
            "error": message,
            "field_errors": field_errors or {},
        })

    def succeeded(self) -> "OrderFormState":
        """Reset the inputs after a successful submission."""
        return OrderFormState(phase="succeeded", success="Order created successfully!")

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "purchaseDate": self.purchase_date,
            "deliveryTime": self.delivery_time,
            "deliveryLocation": self.delivery_location,
            "productName": self.product_name,
            "quantity": self.quantity,
        }
        if self.message:
            payload["message"] = self.message
        return payload


class OrdersView(_State):
    """Filtering and sorting of the orders list."""

    filter: Literal["all", "past", "upcoming"] = "all"
    sort_by: Literal["date", "status"] = "date"
    sort_order: Literal["asc", "desc"] = "desc"

    def with_filter(self, value: str) -> "OrdersView":
        return self.model_copy(update={"filter": value})

    def with_sort_by(self, value: str) -> "OrdersView":
        return self.model_copy(update={"sort_by": value})

    def toggle_order(self) -> "OrdersView":
        return self.model_copy(update={"sort_order": "asc" if self.sort_order == "desc" else "desc"})

    @staticmethod
    def is_past(order: Order, today: date) -> bool:
        """Past means the date has gone by or the order was delivered."""
        return order.purchase_date < today or order.status == OrderStatus.DELIVERED

    def apply(self, orders: list[Order], today: date) -> list[Order]:
        if self.filter == "past":
            selected = [o for o in orders if self.is_past(o, today)]
        elif self.filter == "upcoming":
            selected = [o for o in orders if not self.is_past(o, today)]
        else:
            selected = list(orders)

        if self.sort_by == "date":
            key = lambda o: o.purchase_date  # noqa: E731
        else:
            key = lambda o: status_rank(o.status)  # noqa: E731
        return sorted(selected, key=key, reverse=self.sort_order == "desc")


class ProfileFormState(_State):
    """Inline editing of contact number and country."""

    editing: bool = False
    saving: bool = False
    contact_number: str = ""
    country: str = ""
    error: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileFormState":
        return cls(
            contact_number=profile.contact_number or "",
            country=profile.country or "",
        )

    def start_edit(self) -> "ProfileFormState":
        return self.model_copy(update={"editing": True, "error": None})

    def with_field(self, name: str, value: str) -> "ProfileFormState":
        if name not in ("contact_number", "country"):
            raise ValueError(f"Unknown profile field: {name}")
        return self.model_copy(update={name: value})

    def saving_started(self) -> "ProfileFormState":
        return self.model_copy(update={"saving": True, "error": None})

    def failed(self, message: str) -> "ProfileFormState":
        return self.model_copy(update={"saving": False, "error": message})


class DashboardState(_State):
    """Everything the dashboard shows once loaded."""

    profile: UserProfile
    orders: list[Order]
    options: CatalogOptions
    active_tab: Literal["orders", "new"] = "orders"
    show_profile: bool = False

    def select_tab(self, tab: str) -> "DashboardState":
        return self.model_copy(update={"active_tab": tab})

    def toggle_profile(self) -> "DashboardState":
        return self.model_copy(update={"show_profile": not self.show_profile})

    def order_created(self, order: Order) -> "DashboardState":
        """Show the new order first and switch to the orders tab."""
        return self.model_copy(update={
            "orders": [order, *self.orders],
            "active_tab": "orders",
        })
