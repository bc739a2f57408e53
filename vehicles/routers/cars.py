"""
Car routes.
"""
import logging

from fastapi import APIRouter, Depends, Response, status

from vehicles.assembler import CarResourceAssembler
from vehicles.dependencies import get_assembler, get_car_service
from vehicles.exceptions import CarNotFoundError
from vehicles.schemas.car import Car, CarCollection, CarCreate, CarResource, CarUpdate
from vehicles.services.car_service import CarService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["cars"])


def merge_car(existing: Car, car_update: CarUpdate) -> Car:
    """
    Copy every non-null field of the update onto the existing car.
    Details are merged field by field; a location replaces the old one.
    """
    if car_update.condition is not None:
        existing.condition = car_update.condition

    if car_update.details is not None:
        for field in type(car_update.details).model_fields:
            value = getattr(car_update.details, field)
            if value is not None:
                setattr(existing.details, field, value)

    if car_update.location is not None:
        existing.location = car_update.location

    return existing


@router.get("", response_model=CarCollection)
async def list_cars(
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_assembler),
):
    """
    Get all cars.
    """
    cars = await service.list()
    return assembler.to_collection(cars)


@router.get("/{car_id}", response_model=CarResource)
async def get_car(
    car_id: int,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_assembler),
):
    """
    Get a specific car by ID.
    """
    car = await service.find_by_id(car_id)
    return assembler.to_resource(car)


@router.post("", response_model=CarResource, status_code=status.HTTP_201_CREATED)
async def create_car(
    car: CarCreate,
    response: Response,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_assembler),
):
    """
    Create a new car.
    """
    saved = await service.save(Car(**car.model_dump()))
    resource = assembler.to_resource(saved)
    response.headers["Location"] = resource.links["self"].href
    return resource


@router.put("/{car_id}", response_model=CarResource)
async def update_car(
    car_id: int,
    car_update: CarUpdate,
    service: CarService = Depends(get_car_service),
    assembler: CarResourceAssembler = Depends(get_assembler),
):
    """
    Update a car. Only fields present in the body are changed.
    """
    existing = await service.find_by_id(car_id)
    saved = await service.save(merge_car(existing, car_update))
    return assembler.to_resource(saved)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_car(
    car_id: int,
    service: CarService = Depends(get_car_service),
):
    """
    Delete a car. Unknown ids are treated as already deleted.
    """
    try:
        await service.delete(car_id)
    except CarNotFoundError:
        logger.info("Delete requested for unknown car %s", car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
