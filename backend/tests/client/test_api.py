"""Tests for the API client."""

import json

import httpx
import pytest

from client.api import OrderDeskClient
from client.exceptions import APIError, SessionExpiredError
from client.session import SessionStore
from modules.orders.models import OrderStatus


PROFILE = {
    "id": "p-1",
    "subjectId": "auth0|1",
    "username": "tester",
    "name": "Test User",
    "email": "test@example.com",
    "contactNumber": None,
    "country": None,
    "createdAt": "2099-01-01T09:30:00Z",
    "lastLogin": "2099-01-01T09:30:00Z",
}

ORDER = {
    "id": "o-1",
    "userId": "p-1",
    "username": "tester",
    "purchaseDate": "2099-01-05",
    "deliveryTime": "10 AM",
    "deliveryLocation": "Colombo",
    "productName": "Laptop",
    "quantity": 2,
    "message": None,
    "status": "pending",
    "createdAt": "2099-01-01T09:30:00Z",
}


@pytest.fixture
def session(tmp_path):
    store = SessionStore(tmp_path / "session.json")
    store.save("stored-token")
    return store


def make_client(session, handler) -> OrderDeskClient:
    return OrderDeskClient(
        "http://api.test/api",
        session,
        transport=httpx.MockTransport(handler),
    )


class TestRequests:

    @pytest.mark.asyncio
    async def test_attaches_bearer_token(self, session):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            seen["path"] = request.url.path
            return httpx.Response(200, json=PROFILE)

        async with make_client(session, handler) as client:
            profile = await client.get_profile()

        assert seen == {"auth": "Bearer stored-token", "path": "/api/user/profile"}
        assert profile.subject_id == "auth0|1"

    @pytest.mark.asyncio
    async def test_no_token_no_header(self, tmp_path):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"deliveryTimes": [], "locations": [], "products": []})

        async with make_client(SessionStore(tmp_path / "none.json"), handler) as client:
            await client.get_options()

        assert seen["auth"] is None

    @pytest.mark.asyncio
    async def test_get_orders(self, session):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[ORDER, {**ORDER, "id": "o-2", "status": "shipped"}])

        async with make_client(session, handler) as client:
            orders = await client.get_orders()

        assert [o.id for o in orders] == ["o-1", "o-2"]
        assert orders[1].status == OrderStatus.SHIPPED

    @pytest.mark.asyncio
    async def test_create_order_posts_payload(self, session):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json=ORDER)

        payload = {"purchaseDate": "2099-01-05", "quantity": 2}
        async with make_client(session, handler) as client:
            order = await client.create_order(payload)

        assert seen == {"method": "POST", "body": payload}
        assert order.id == "o-1"

    @pytest.mark.asyncio
    async def test_update_profile_sends_only_given_fields(self, session):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={**PROFILE, "country": "Peru"})

        async with make_client(session, handler) as client:
            profile = await client.update_profile(country="Peru")

        assert seen == {"method": "PUT", "body": {"country": "Peru"}}
        assert profile.country == "Peru"


class TestErrors:

    @pytest.mark.asyncio
    async def test_unauthorized_clears_session(self, session):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "Authentication token has expired"})

        async with make_client(session, handler) as client:
            with pytest.raises(SessionExpiredError) as exc_info:
                await client.get_orders()

        assert exc_info.value.message == "Session expired, please log in again"
        assert session.load() is None

    @pytest.mark.asyncio
    async def test_validation_error_details(self, session):
        body = {
            "error": "Validation failed",
            "details": [
                {"field": "purchaseDate", "message": "Delivery not available on Sundays", "code": "NO_DELIVERY_DAY"},
                {"field": "purchaseDate", "message": "second", "code": "X"},
                {"field": "quantity", "message": "Quantity must be a whole number between 1 and 100",
                 "code": "INVALID_QUANTITY"},
            ],
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json=body)

        async with make_client(session, handler) as client:
            with pytest.raises(APIError) as exc_info:
                await client.create_order({})

        error = exc_info.value
        assert error.status_code == 400
        assert error.message == "Validation failed"
        assert error.field_errors() == {
            "purchaseDate": "Delivery not available on Sundays",
            "quantity": "Quantity must be a whole number between 1 and 100",
        }
        assert session.load() == "stored-token"

    @pytest.mark.asyncio
    async def test_non_json_error(self, session):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with make_client(session, handler) as client:
            with pytest.raises(APIError) as exc_info:
                await client.get_orders()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Request failed with status 502"
        assert exc_info.value.details == []

    @pytest.mark.asyncio
    async def test_network_failure(self, session):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(session, handler) as client:
            with pytest.raises(APIError) as exc_info:
                await client.get_profile()

        assert exc_info.value.status_code == 0
        assert "Could not reach the API" in exc_info.value.message
