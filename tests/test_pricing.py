"""Tests for the pricing service."""

import pytest
from fastapi.testclient import TestClient

from pricing.config import PricingSettings
from pricing.main import create_app
from pricing.service import MAX_PRICE, MIN_PRICE, PriceNotFoundError, PricingService


@pytest.fixture
def client():
    with TestClient(create_app(PricingSettings(seed=42, registry_enabled=False))) as test_client:
        yield test_client


class TestPricingService:

    def test_known_vehicles(self):
        service = PricingService(max_vehicle_id=19)

        assert sorted(service.prices) == list(range(1, 20))
        for vehicle_id in range(1, 20):
            price = service.get_price(vehicle_id)
            assert price.vehicle_id == vehicle_id
            assert price.currency == "USD"
            assert MIN_PRICE <= price.price <= MAX_PRICE

    def test_unknown_vehicle(self):
        with pytest.raises(PriceNotFoundError, match="Cannot find price for Vehicle 20"):
            PricingService(max_vehicle_id=19).get_price(20)

    def test_seed_is_reproducible(self):
        first = PricingService(seed=7)
        second = PricingService(seed=7)

        assert first.get_price(3) == second.get_price(3)

    def test_price_is_stable(self):
        service = PricingService()

        assert service.get_price(1) == service.get_price(1)


class TestPriceEndpoint:

    def test_get_price(self, client):
        response = client.get("/services/price", params={"vehicleId": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["vehicleId"] == 1
        assert body["currency"] == "USD"
        assert MIN_PRICE <= body["price"] <= MAX_PRICE

    def test_unknown_vehicle(self, client):
        response = client.get("/services/price", params={"vehicleId": 20})

        assert response.status_code == 404
        assert response.json()["detail"] == "Cannot find price for Vehicle 20"

    def test_missing_vehicle_id(self, client):
        response = client.get("/services/price")

        assert response.status_code == 400
        assert response.json()["detail"] == "Validation failed"
        assert response.json()["errors"][0]["field"] == "vehicleId"

    def test_non_numeric_vehicle_id(self, client):
        response = client.get("/services/price", params={"vehicleId": "abc"})

        assert response.status_code == 400

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
