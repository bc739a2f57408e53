"""
Maps (reverse geocoding) HTTP client.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from vehicles.schemas.car import Location

logger = logging.getLogger(__name__)


class MapsClient:
    """Resolves coordinates to a street address through the maps service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def get_address(self, location: Location) -> Location:
        """
        Return a copy of the location with address fields filled in.
        The location is returned unchanged if the maps service is unavailable.
        """
        url = f"{self.base_url}/maps"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.get(url, params={"lat": location.lat, "lon": location.lon})
                response.raise_for_status()
                data = response.json()
            return location.model_copy(update={
                "address": data.get("address"),
                "city": data.get("city"),
                "state": data.get("state"),
                "zip": data.get("zip"),
            })
        except (httpx.HTTPError, AttributeError, ValueError) as e:
            logger.warning("Map service is down: %s", e)
            return location
