"""
Pydantic schemas for Car and its nested records.

Field names are snake_case in Python and camelCase on the wire.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Dict, List, Optional
from vehicles.models.car import Condition


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class Manufacturer(CamelModel):
    """Manufacturer reference, identified by its numeric code."""
    code: int
    name: Optional[str] = None


class Location(CamelModel):
    """Coordinates plus the address resolved by the maps service."""
    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class Details(CamelModel):
    """Descriptive details of a car."""
    body: str
    model: str
    manufacturer: Manufacturer
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None

    @field_validator("body", "model")
    @classmethod
    def check_text(cls, value):
        return _not_blank(value)


class DetailsUpdate(CamelModel):
    """Details for a partial update; every field is optional."""
    body: Optional[str] = None
    model: Optional[str] = None
    manufacturer: Optional[Manufacturer] = None
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None

    @field_validator("body", "model")
    @classmethod
    def check_text(cls, value):
        return _not_blank(value)


class CarCreate(CamelModel):
    """Schema for creating a car."""
    condition: Condition
    details: Details
    location: Location


class CarUpdate(CamelModel):
    """Schema for updating a car. Only fields that are present are applied."""
    condition: Optional[Condition] = None
    details: Optional[DetailsUpdate] = None
    location: Optional[Location] = None


class Car(CamelModel):
    """A car as stored, optionally enriched with price and address."""
    id: Optional[int] = None
    condition: Condition
    details: Details
    location: Location
    price: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class Link(BaseModel):
    """Hypermedia link."""
    href: str


class CarResource(Car):
    """Car with navigational links."""
    links: Dict[str, Link] = Field(alias="_links")


class CarCollection(BaseModel):
    """HAL-style collection of car resources."""
    embedded: Dict[str, List[CarResource]] = Field(alias="_embedded")
    links: Dict[str, Link] = Field(alias="_links")

    model_config = ConfigDict(populate_by_name=True)
