"""Tests for the options catalog."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service
from modules.catalog.models import DELIVERY_TIMES, LOCATIONS, PRODUCTS
from modules.catalog.service import CatalogService


class TestCatalogService:

    def test_default_options(self):
        options = CatalogService().get_options()
        assert options.delivery_times == ["10 AM", "11 AM", "12 PM"]
        assert len(options.locations) == 25
        assert len(options.products) == 10

    def test_membership(self):
        service = CatalogService()
        assert service.is_delivery_time("11 AM")
        assert not service.is_delivery_time("11 am")
        assert service.is_location("Nuwara Eliya")
        assert not service.is_location("Atlantis")
        assert service.is_product("Smart Watch")
        assert not service.is_product("Spaceship")

    def test_custom_options(self):
        service = CatalogService(delivery_times=("9 AM",), locations=("Here",), products=("Thing",))
        assert service.get_options().delivery_times == ["9 AM"]
        assert service.is_location("Here")


class TestOptionsEndpoint:
    """Tests for GET /api/options"""

    @pytest.fixture
    def client(self, auth_service):
        app = create_app()
        app.dependency_overrides[get_auth_service] = lambda: auth_service
        return TestClient(app)

    def test_returns_catalog(self, client, auth_headers):
        response = client.get("/api/options", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "deliveryTimes": list(DELIVERY_TIMES),
            "locations": list(LOCATIONS),
            "products": list(PRODUCTS),
        }

    def test_requires_auth(self, client):
        response = client.get("/api/options")
        assert response.status_code == 401
