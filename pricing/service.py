"""
In-memory price catalogue.
"""
import logging
import random
from typing import Dict, Optional

from pricing.schemas import Price

logger = logging.getLogger(__name__)

MIN_PRICE = 10000.0
MAX_PRICE = 50000.0


class PriceNotFoundError(Exception):
    """Raised when no price exists for a vehicle id."""

    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(f"Cannot find price for Vehicle {vehicle_id}")


class PricingService:
    """Holds one random price per known vehicle id, fixed for the life of the process."""

    def __init__(self, max_vehicle_id: int = 19, currency: str = "USD", seed: Optional[int] = None):
        rng = random.Random(seed)
        self.prices: Dict[int, Price] = {
            vehicle_id: Price(
                currency=currency,
                price=round(rng.uniform(MIN_PRICE, MAX_PRICE), 2),
                vehicle_id=vehicle_id,
            )
            for vehicle_id in range(1, max_vehicle_id + 1)
        }
        logger.info("Generated prices for %d vehicles", len(self.prices))

    def get_price(self, vehicle_id: int) -> Price:
        try:
            return self.prices[vehicle_id]
        except KeyError:
            raise PriceNotFoundError(vehicle_id) from None
