"""
Orders module.

Order validation, lifecycle and storage.

Public API:
- IOrderService: Interface for order operations
- OrderValidator, OrderPolicy: Submission rules
- Order, OrderStatus, OrderSubmission: Data models
- OrderValidationError
"""

from .interfaces import IOrderService
from .models import Order, OrderStatus, OrderSubmission, ValidatedOrder, ValidationIssue
from .validation import OrderPolicy, OrderValidator
from .exceptions import OrderValidationError

__all__ = [
    # Interface
    "IOrderService",
    # Models
    "Order",
    "OrderStatus",
    "OrderSubmission",
    "ValidatedOrder",
    "ValidationIssue",
    # Validation
    "OrderPolicy",
    "OrderValidator",
    # Exceptions
    "OrderValidationError",
]
