"""
Options catalog module.

Static enumerations of delivery time slots, locations and products.
"""

from .models import CatalogOptions, DELIVERY_TIMES, LOCATIONS, PRODUCTS
from .service import CatalogService

__all__ = [
    "CatalogOptions",
    "CatalogService",
    "DELIVERY_TIMES",
    "LOCATIONS",
    "PRODUCTS",
]
