"""
Outbound clients for the pricing and maps services.
"""
from vehicles.clients.maps import MapsClient
from vehicles.clients.prices import PRICE_UNAVAILABLE, PriceClient

__all__ = ["MapsClient", "PriceClient", "PRICE_UNAVAILABLE"]
