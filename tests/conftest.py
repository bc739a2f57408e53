"""Shared fixtures for the vehicles and pricing tests."""

import copy

import pytest
from fastapi.testclient import TestClient

from vehicles.config import Settings
from vehicles.dependencies import get_maps_client, get_price_client
from vehicles.main import create_app
from vehicles.schemas.car import Location

IMPALA = {
    "condition": "USED",
    "details": {
        "body": "sedan",
        "model": "Impala",
        "manufacturer": {"code": 101, "name": "Chevrolet"},
        "numberOfDoors": 4,
        "fuelType": "Gasoline",
        "engine": "3.6L V6",
        "mileage": 32280,
        "modelYear": 2018,
        "productionYear": 2018,
        "externalColor": "white",
    },
    "location": {"lat": 40.730610, "lon": -73.935242},
}


class StubPriceClient:
    """Answers every price lookup without a network call."""

    async def get_price(self, vehicle_id):
        return f"USD {vehicle_id}9999.99"


class StubMapsClient:
    """Resolves every location to the same address."""

    async def get_address(self, location: Location) -> Location:
        return location.model_copy(update={
            "address": "777 Brockton Avenue",
            "city": "Abington",
            "state": "MA",
            "zip": "2351",
        })


@pytest.fixture
def car_payload():
    """A valid car request body."""
    return copy.deepcopy(IMPALA)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'vehicles.db'}",
        registry_enabled=False,
    )


@pytest.fixture
def app(settings):
    application = create_app(settings)
    application.dependency_overrides[get_price_client] = StubPriceClient
    application.dependency_overrides[get_maps_client] = StubMapsClient
    return application


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def created_car(client, car_payload):
    """Create the sample car and return the response body."""
    response = client.post("/cars", json=car_payload)
    assert response.status_code == 201
    return response.json()
