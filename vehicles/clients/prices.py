"""
Pricing service HTTP client.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

PRICE_UNAVAILABLE = "(consult price)"


class PriceClient:
    """Looks up the current price of a vehicle in the pricing service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def get_price(self, vehicle_id: int) -> str:
        """
        Return the price formatted as "<currency> <amount>".
        Falls back to a placeholder when the pricing service cannot answer.
        """
        url = f"{self.base_url}/services/price"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.get(url, params={"vehicleId": vehicle_id})
                response.raise_for_status()
                data = response.json()
            return f"{data['currency']} {data['price']}"
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            logger.warning("Unexpected error retrieving price for vehicle %s: %s", vehicle_id, e)
            return PRICE_UNAVAILABLE
