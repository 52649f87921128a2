"""
Order submission rules.

The validator is the trust boundary for orders: the client runs the date and
slot checks only to give early feedback, and nothing is written until every
rule below has passed.

Rules, in order:
    1. purchaseDate parses as a calendar date
    2. purchaseDate is not before today (local day)
    3. purchaseDate is not the non-delivery weekday
    4. deliveryTime is one of the catalog slots
    5. deliveryLocation length bounds (and catalog membership, if enforced)
    6. productName length bounds (and catalog membership, if enforced)
    7. quantity is an integer within bounds
    8. message, if given, within the length limit

Within a field the first failing rule wins. Failures in different fields are
all collected so the client can highlight every offending field at once.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from modules.catalog.service import CatalogService
from shared.config import Settings
from shared.text import clean_text, escape_markup

from .exceptions import OrderValidationError
from .models import OrderSubmission, ValidatedOrder, ValidationIssue

# ASCII digits only. Longer strings are out of range anyway and int() caps digit count.
_INTEGER = re.compile(r"[+-]?[0-9]{1,18}")


@dataclass(frozen=True)
class OrderPolicy:
    """Business limits applied to order submissions."""

    min_quantity: int = 1
    max_quantity: int = 100
    message_max_length: int = 500
    location_min_length: int = 2
    location_max_length: int = 50
    product_min_length: int = 2
    product_max_length: int = 100
    non_delivery_weekday: int = 6
    timezone: str = "Asia/Colombo"
    enforce_catalog_membership: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "OrderPolicy":
        return cls(
            min_quantity=settings.order_min_quantity,
            max_quantity=settings.order_max_quantity,
            message_max_length=settings.order_message_max_length,
            location_min_length=settings.order_location_min_length,
            location_max_length=settings.order_location_max_length,
            product_min_length=settings.order_product_min_length,
            product_max_length=settings.order_product_max_length,
            non_delivery_weekday=settings.non_delivery_weekday,
            timezone=settings.delivery_timezone,
            enforce_catalog_membership=settings.enforce_catalog_membership,
        )

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.timezone)

    def today(self) -> date:
        """The current date in the delivery timezone."""
        return datetime.now(self.tz).date()


def parse_purchase_date(value: Any, tz: tzinfo) -> Optional[date]:
    """
    Parse a purchase date.

    Accepts ``YYYY-MM-DD`` (and the other ISO 8601 date forms) or a full
    ISO 8601 datetime. An aware datetime is converted to ``tz`` before its
    date is taken, so the comparison happens at local-day granularity.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz)
    return parsed.date()


def parse_quantity(value: Any) -> Optional[int]:
    """Integers and digit strings only; booleans and floats are not quantities."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class OrderValidator:
    """
    Decides whether an order submission may be stored.

    ``today`` is passed in by the caller rather than read from the clock so
    the date rules can be checked against any day.
    """

    def __init__(self, policy: OrderPolicy, catalog: CatalogService):
        self._policy = policy
        self._catalog = catalog

    @property
    def policy(self) -> OrderPolicy:
        return self._policy

    def validate(self, submission: OrderSubmission, today: date) -> ValidatedOrder:
        """
        Check every rule and return the sanitized order.

        Raises:
            OrderValidationError: With one issue per offending field.
        """
        issues: list[ValidationIssue] = []

        purchase_date = self._check_purchase_date(submission.purchase_date, today, issues)
        delivery_time = self._check_delivery_time(submission.delivery_time, issues)
        location = self._check_text(
            submission.delivery_location,
            field="deliveryLocation",
            label="Delivery location",
            code="INVALID_LOCATION",
            min_length=self._policy.location_min_length,
            max_length=self._policy.location_max_length,
            member_of=self._catalog.is_location,
            issues=issues,
        )
        product = self._check_text(
            submission.product_name,
            field="productName",
            label="Product name",
            code="INVALID_PRODUCT",
            min_length=self._policy.product_min_length,
            max_length=self._policy.product_max_length,
            member_of=self._catalog.is_product,
            issues=issues,
        )
        quantity = self._check_quantity(submission.quantity, issues)
        message = self._check_message(submission.message, issues)

        if issues:
            raise OrderValidationError([issue.model_dump() for issue in issues])

        return ValidatedOrder(
            purchase_date=purchase_date,
            delivery_time=delivery_time,
            delivery_location=escape_markup(location),
            product_name=escape_markup(product),
            quantity=quantity,
            message=escape_markup(message) if message else None,
        )

    def _check_purchase_date(
        self,
        value: Any,
        today: date,
        issues: list[ValidationIssue],
    ) -> Optional[date]:
        field = "purchaseDate"
        if _is_missing(value):
            issues.append(ValidationIssue(field=field, message="Purchase date is required", code="REQUIRED"))
            return None

        purchase_date = parse_purchase_date(value, self._policy.tz)
        if purchase_date is None:
            issues.append(ValidationIssue(field=field, message="Invalid date", code="INVALID_DATE"))
            return None

        if purchase_date < today:
            issues.append(ValidationIssue(
                field=field,
                message="Purchase date cannot be in the past",
                code="DATE_IN_PAST",
            ))
            return None

        if purchase_date.weekday() == self._policy.non_delivery_weekday:
            day_name = calendar.day_name[self._policy.non_delivery_weekday]
            issues.append(ValidationIssue(
                field=field,
                message=f"Delivery not available on {day_name}s",
                code="NO_DELIVERY_DAY",
            ))
            return None

        return purchase_date

    def _check_delivery_time(self, value: Any, issues: list[ValidationIssue]) -> Optional[str]:
        field = "deliveryTime"
        if _is_missing(value):
            issues.append(ValidationIssue(field=field, message="Delivery time is required", code="REQUIRED"))
            return None
        if not isinstance(value, str) or not self._catalog.is_delivery_time(value):
            issues.append(ValidationIssue(field=field, message="Invalid delivery time", code="INVALID_SLOT"))
            return None
        return value

    def _check_text(
        self,
        value: Any,
        field: str,
        label: str,
        code: str,
        min_length: int,
        max_length: int,
        member_of,
        issues: list[ValidationIssue],
    ) -> Optional[str]:
        if value is None:
            issues.append(ValidationIssue(field=field, message=f"{label} is required", code="REQUIRED"))
            return None

        text = clean_text(value)
        if text is None or not min_length <= len(text) <= max_length:
            issues.append(ValidationIssue(
                field=field,
                message=f"{label} must be between {min_length} and {max_length} characters",
                code=code,
            ))
            return None

        if self._policy.enforce_catalog_membership and not member_of(text):
            issues.append(ValidationIssue(field=field, message=f"Unknown {label.lower()}", code=code))
            return None

        return text

    def _check_quantity(self, value: Any, issues: list[ValidationIssue]) -> Optional[int]:
        field = "quantity"
        if value is None:
            issues.append(ValidationIssue(field=field, message="Quantity is required", code="REQUIRED"))
            return None

        quantity = parse_quantity(value)
        low, high = self._policy.min_quantity, self._policy.max_quantity
        if quantity is None or not low <= quantity <= high:
            issues.append(ValidationIssue(
                field=field,
                message=f"Quantity must be a whole number between {low} and {high}",
                code="INVALID_QUANTITY",
            ))
            return None
        return quantity

    def _check_message(self, value: Any, issues: list[ValidationIssue]) -> Optional[str]:
        if value is None:
            return None

        text = clean_text(value)
        limit = self._policy.message_max_length
        if text is None or len(text) > limit:
            issues.append(ValidationIssue(
                field="message",
                message=f"Message must be at most {limit} characters",
                code="INVALID_MESSAGE",
            ))
            return None
        return text or None
