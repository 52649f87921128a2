"""
HTTP client for the OrderDesk API.

Every request carries the stored bearer credential. A 401 clears the
session and raises SessionExpiredError; any other failure raises APIError
built from the API's ``{"error", "details"}`` envelope.
"""

import logging
from typing import Any, Optional

import httpx

from modules.catalog.models import CatalogOptions
from modules.orders.models import Order
from modules.users.models import UserProfile

from .exceptions import APIError, SessionExpiredError
from .session import SessionStore

logger = logging.getLogger(__name__)


class OrderDeskClient:
    """
    Async API client.

    Usage:
        async with OrderDeskClient("http://localhost:8000/api", session) as client:
            orders = await client.get_orders()
    """

    def __init__(
        self,
        base_url: str,
        session: SessionStore,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._session = session
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "OrderDeskClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: Optional[dict[str, Any]] = None) -> Any:
        headers = {}
        token = self._session.load()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise APIError(0, f"Could not reach the API: {e}")

        if response.status_code == 401:
            self._session.clear()
            raise SessionExpiredError()

        if response.is_error:
            raise self._to_api_error(response)

        return response.json()

    @staticmethod
    def _to_api_error(response: httpx.Response) -> APIError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or f"Request failed with status {response.status_code}"
        return APIError(response.status_code, message, body.get("details"))

    async def get_profile(self) -> UserProfile:
        return UserProfile.model_validate(await self._request("GET", "/user/profile"))

    async def update_profile(
        self,
        contact_number: Optional[str] = None,
        country: Optional[str] = None,
    ) -> UserProfile:
        """Send only the fields that were given."""
        payload = {}
        if contact_number is not None:
            payload["contactNumber"] = contact_number
        if country is not None:
            payload["country"] = country
        return UserProfile.model_validate(await self._request("PUT", "/user/profile", json=payload))

    async def get_orders(self) -> list[Order]:
        data = await self._request("GET", "/orders")
        return [Order.model_validate(item) for item in data]

    async def create_order(self, payload: dict[str, Any]) -> Order:
        return Order.model_validate(await self._request("POST", "/orders", json=payload))

    async def get_options(self) -> CatalogOptions:
        return CatalogOptions.model_validate(await self._request("GET", "/options"))
