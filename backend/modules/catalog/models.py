"""
Options catalog data models.

The catalog is static: the enumerations below are the complete sets the
client offers in its selection widgets.
"""

from pydantic import Field

from shared.models import CamelModel


DELIVERY_TIMES = ("10 AM", "11 AM", "12 PM")

LOCATIONS = (
    "Colombo", "Gampaha", "Kalutara", "Kandy", "Matale", "Nuwara Eliya",
    "Galle", "Matara", "Hambantota", "Jaffna", "Kilinochchi", "Mannar",
    "Vavuniya", "Mullaitivu", "Batticaloa", "Ampara", "Trincomalee",
    "Kurunegala", "Puttalam", "Anuradhapura", "Polonnaruwa", "Badulla",
    "Moneragala", "Ratnapura", "Kegalle",
)

PRODUCTS = (
    "Laptop", "Smartphone", "Tablet", "Headphones", "Smart Watch",
    "Gaming Console", "Camera", "Monitor", "Keyboard", "Mouse",
)


class CatalogOptions(CamelModel):
    """Enumerated options served to the client."""

    delivery_times: list[str] = Field(..., description="Delivery time slots")
    locations: list[str] = Field(..., description="Delivery locations")
    products: list[str] = Field(..., description="Orderable products")

    model_config = {"frozen": True}
