"""Tests for the pricing and maps HTTP clients."""

import httpx
import pytest

from vehicles.clients.maps import MapsClient
from vehicles.clients.prices import PRICE_UNAVAILABLE, PriceClient
from vehicles.schemas.car import Location


def unreachable(request):
    raise httpx.ConnectError("connection refused", request=request)


class TestPriceClient:

    @pytest.mark.asyncio
    async def test_get_price(self):
        def handler(request):
            assert request.url.path == "/services/price"
            assert request.url.params["vehicleId"] == "7"
            return httpx.Response(200, json={"currency": "USD", "price": 23456.78, "vehicleId": 7})

        client = PriceClient("http://pricing/", transport=httpx.MockTransport(handler))

        assert await client.get_price(7) == "USD 23456.78"

    @pytest.mark.asyncio
    async def test_price_not_found(self):
        client = PriceClient(
            "http://pricing",
            transport=httpx.MockTransport(lambda request: httpx.Response(404, json={"detail": "nope"})),
        )

        assert await client.get_price(99) == PRICE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_service_unreachable(self):
        client = PriceClient("http://pricing", transport=httpx.MockTransport(unreachable))

        assert await client.get_price(1) == PRICE_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_malformed_payload(self):
        client = PriceClient(
            "http://pricing",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"amount": 1})),
        )

        assert await client.get_price(1) == PRICE_UNAVAILABLE


class TestMapsClient:

    @pytest.mark.asyncio
    async def test_get_address(self):
        def handler(request):
            assert request.url.path == "/maps"
            assert float(request.url.params["lat"]) == 40.73061
            assert float(request.url.params["lon"]) == -73.935242
            return httpx.Response(200, json={
                "address": "777 Brockton Avenue",
                "city": "Abington",
                "state": "MA",
                "zip": "2351",
            })

        client = MapsClient("http://maps", transport=httpx.MockTransport(handler))
        location = Location(lat=40.730610, lon=-73.935242)

        resolved = await client.get_address(location)

        assert resolved.address == "777 Brockton Avenue"
        assert resolved.city == "Abington"
        assert resolved.state == "MA"
        assert resolved.zip == "2351"
        assert resolved.lat == location.lat
        assert location.address is None

    @pytest.mark.asyncio
    async def test_service_error_returns_location_unchanged(self):
        client = MapsClient(
            "http://maps",
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )
        location = Location(lat=1.0, lon=2.0)

        assert await client.get_address(location) == location

    @pytest.mark.asyncio
    async def test_service_unreachable(self):
        client = MapsClient("http://maps", transport=httpx.MockTransport(unreachable))
        location = Location(lat=1.0, lon=2.0)

        assert await client.get_address(location) is location
