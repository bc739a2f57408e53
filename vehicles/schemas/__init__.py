"""
Pydantic schemas for request/response validation.
"""
from vehicles.schemas.car import (
    Manufacturer, Location, Details, DetailsUpdate,
    CarCreate, CarUpdate, Car, Link, CarResource, CarCollection,
)

__all__ = [
    "Manufacturer", "Location", "Details", "DetailsUpdate",
    "CarCreate", "CarUpdate", "Car", "Link", "CarResource", "CarCollection",
]
