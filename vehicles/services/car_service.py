"""
Car service: persistence plus price and address enrichment.
"""
import logging
from typing import List

from vehicles.clients.maps import MapsClient
from vehicles.clients.prices import PriceClient
from vehicles.exceptions import CarNotFoundError
from vehicles.repository import CarRepository
from vehicles.schemas.car import Car

logger = logging.getLogger(__name__)


class CarService:
    """
    Orchestrates the car repository and the two enrichment clients.
    Price and address are attached to returned cars only; they are never stored.
    """

    def __init__(self, repository: CarRepository, price_client: PriceClient, maps_client: MapsClient):
        self.repository = repository
        self.price_client = price_client
        self.maps_client = maps_client

    async def list(self) -> List[Car]:
        cars = await self.repository.find_all()
        return [await self._enrich(car) for car in cars]

    async def find_by_id(self, car_id: int) -> Car:
        car = await self.repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return await self._enrich(car)

    async def save(self, car: Car) -> Car:
        """Insert the car when it has no id, otherwise overwrite the stored row."""
        if car.id is None:
            return await self.repository.add(car)
        return await self.repository.update(car)

    async def delete(self, car_id: int) -> None:
        await self.repository.delete(car_id)

    async def _enrich(self, car: Car) -> Car:
        price = await self.price_client.get_price(car.id)
        location = await self.maps_client.get_address(car.location)
        return car.model_copy(update={"price": price, "location": location})
