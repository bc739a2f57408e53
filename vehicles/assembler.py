"""
Builds hypermedia resources for cars.
"""
from typing import Iterable

from vehicles.schemas.car import Car, CarCollection, CarResource, Link

CARS_PATH = "/cars"


class CarResourceAssembler:
    """Wraps cars with self and collection links rooted at base_url."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def collection_href(self) -> str:
        return f"{self.base_url}{CARS_PATH}"

    def self_href(self, car_id: int) -> str:
        return f"{self.base_url}{CARS_PATH}/{car_id}"

    def to_resource(self, car: Car) -> CarResource:
        links = {
            "self": Link(href=self.self_href(car.id)),
            "cars": Link(href=self.collection_href()),
        }
        return CarResource(**car.model_dump(), links=links)

    def to_collection(self, cars: Iterable[Car]) -> CarCollection:
        return CarCollection(
            embedded={"carList": [self.to_resource(car) for car in cars]},
            links={"self": Link(href=self.collection_href())},
        )
