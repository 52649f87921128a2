"""
Orders module exceptions.
"""

from typing import Any

from shared.exceptions import ValidationError


class OrderValidationError(ValidationError):
    """Raised when an order submission breaks one or more rules."""

    def __init__(self, issues: list[dict[str, Any]]):
        super().__init__(
            "Validation failed",
            issues=issues,
            code="ORDER_VALIDATION_FAILED",
        )
