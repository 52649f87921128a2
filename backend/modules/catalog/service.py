"""
Options catalog service.

Serves the static enumerations and answers membership questions for the
order validator.
"""

from .models import CatalogOptions, DELIVERY_TIMES, LOCATIONS, PRODUCTS


class CatalogService:
    """Read-only access to the enumerated delivery slots, locations and products."""

    def __init__(
        self,
        delivery_times: tuple[str, ...] = DELIVERY_TIMES,
        locations: tuple[str, ...] = LOCATIONS,
        products: tuple[str, ...] = PRODUCTS,
    ):
        self._options = CatalogOptions(
            delivery_times=list(delivery_times),
            locations=list(locations),
            products=list(products),
        )

    def get_options(self) -> CatalogOptions:
        return self._options

    def is_delivery_time(self, value: str) -> bool:
        return value in self._options.delivery_times

    def is_location(self, value: str) -> bool:
        return value in self._options.locations

    def is_product(self, value: str) -> bool:
        return value in self._options.products

