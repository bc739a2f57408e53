"""
Request-scoped wiring of repositories, clients and services.
"""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles.assembler import CarResourceAssembler
from vehicles.clients.maps import MapsClient
from vehicles.clients.prices import PriceClient
from vehicles.config import Settings
from vehicles.database import get_db
from vehicles.repository import CarRepository
from vehicles.services.car_service import CarService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_price_client(settings: Settings = Depends(get_app_settings)) -> PriceClient:
    return PriceClient(settings.pricing_url, timeout_seconds=settings.client_timeout)


def get_maps_client(settings: Settings = Depends(get_app_settings)) -> MapsClient:
    return MapsClient(settings.maps_url, timeout_seconds=settings.client_timeout)


def get_car_service(
    db: AsyncSession = Depends(get_db),
    price_client: PriceClient = Depends(get_price_client),
    maps_client: MapsClient = Depends(get_maps_client),
) -> CarService:
    return CarService(CarRepository(db), price_client, maps_client)


def get_assembler(request: Request) -> CarResourceAssembler:
    return CarResourceAssembler(str(request.base_url))
