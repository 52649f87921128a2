"""
Orders module data models.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import CamelModel


class OrderStatus(str, Enum):
    """Fulfillment status, in lifecycle order."""

    PENDING = "pending"        # Created, awaiting fulfillment
    PROCESSING = "processing"  # Picked up by fulfillment
    SHIPPED = "shipped"        # Handed to the courier
    DELIVERED = "delivered"    # Terminal


class OrderSubmission(CamelModel):
    """
    Raw order payload as submitted by the client.

    Fields are deliberately untyped: every type and range problem is
    reported by the order validator as an itemized issue instead of a
    generic parsing error.
    """

    model_config = ConfigDict(extra="ignore")

    purchase_date: Any = None
    delivery_time: Any = None
    delivery_location: Any = None
    product_name: Any = None
    quantity: Any = None
    message: Any = None


class ValidatedOrder(BaseModel):
    """An order submission that passed every rule, with text sanitized."""

    model_config = ConfigDict(frozen=True)

    purchase_date: date
    delivery_time: str
    delivery_location: str
    product_name: str
    quantity: int
    message: Optional[str] = None


class ValidationIssue(BaseModel):
    """One failed rule, reported back to the client."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Offending field, as named on the wire")
    message: str = Field(..., description="Human readable reason")
    code: str = Field(..., description="Machine readable reason")


class Order(CamelModel):
    """A stored order."""

    id: str = Field(..., description="Order ID (UUID)")
    user_id: str = Field(..., description="Owning profile ID")
    username: str = Field(..., description="Owner's username at creation time")
    purchase_date: date = Field(..., description="Requested delivery date")
    delivery_time: str = Field(..., description="Delivery time slot")
    delivery_location: str = Field(..., description="Delivery location")
    product_name: str = Field(..., description="Product name")
    quantity: int = Field(..., description="Quantity")
    message: Optional[str] = Field(None, description="Optional note")
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Fulfillment status")
    created_at: datetime = Field(..., description="Creation time")
