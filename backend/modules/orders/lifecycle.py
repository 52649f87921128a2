"""
Order lifecycle.

pending -> processing -> shipped -> delivered. Transitions only move one
step forward. Advancing an order belongs to the fulfillment process; this
service only creates orders in PENDING and reads their status.
"""

from typing import Optional

from .models import OrderStatus

ORDER_FLOW: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)

INITIAL_STATUS = ORDER_FLOW[0]


def status_rank(status: OrderStatus) -> int:
    """Position of a status in the lifecycle, starting at 0."""
    return ORDER_FLOW.index(OrderStatus(status))


def is_terminal(status: OrderStatus) -> bool:
    return OrderStatus(status) == ORDER_FLOW[-1]


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    """The status an order moves to next, or None once delivered."""
    if is_terminal(status):
        return None
    return ORDER_FLOW[status_rank(status) + 1]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Whether ``current`` may move to ``target``."""
    return next_status(current) == OrderStatus(target)
