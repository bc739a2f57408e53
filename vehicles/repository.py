"""
Persistence gateway for cars.
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vehicles.exceptions import CarNotFoundError
from vehicles.models.car import Car as CarRow
from vehicles.schemas.car import Car, Details, Location, Manufacturer

logger = logging.getLogger(__name__)


def to_domain(row: CarRow) -> Car:
    """Build a Car record from a database row."""
    return Car(
        id=row.id,
        condition=row.condition,
        created_at=row.created_at,
        modified_at=row.modified_at,
        details=Details(
            body=row.body,
            model=row.model,
            manufacturer=Manufacturer(code=row.manufacturer_code, name=row.manufacturer_name),
            number_of_doors=row.number_of_doors,
            fuel_type=row.fuel_type,
            engine=row.engine,
            mileage=row.mileage,
            model_year=row.model_year,
            production_year=row.production_year,
            external_color=row.external_color,
        ),
        location=Location(lat=row.lat, lon=row.lon),
    )


def apply_to_row(car: Car, row: CarRow) -> CarRow:
    """Copy the persistent fields of a Car onto a row. Id and timestamps are left alone."""
    details = car.details
    row.condition = car.condition
    row.body = details.body
    row.model = details.model
    row.manufacturer_code = details.manufacturer.code
    row.manufacturer_name = details.manufacturer.name
    row.number_of_doors = details.number_of_doors
    row.fuel_type = details.fuel_type
    row.engine = details.engine
    row.mileage = details.mileage
    row.model_year = details.model_year
    row.production_year = details.production_year
    row.external_color = details.external_color
    row.lat = car.location.lat
    row.lon = car.location.lon
    return row


class CarRepository:
    """Maps Car records to the cars table by primary key."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> List[Car]:
        result = await self.db.execute(select(CarRow).order_by(CarRow.id))
        return [to_domain(row) for row in result.scalars().all()]

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        row = await self._get_row(car_id)
        return to_domain(row) if row else None

    async def add(self, car: Car) -> Car:
        row = apply_to_row(car, CarRow())
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("Created car %s", row.id)
        return to_domain(row)

    async def update(self, car: Car) -> Car:
        row = await self._get_row(car.id)
        if row is None:
            raise CarNotFoundError(car.id)
        apply_to_row(car, row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("Updated car %s", row.id)
        return to_domain(row)

    async def delete(self, car_id: int) -> None:
        row = await self._get_row(car_id)
        if row is None:
            raise CarNotFoundError(car_id)
        await self.db.delete(row)
        await self.db.commit()
        logger.info("Deleted car %s", car_id)

    async def _get_row(self, car_id: int) -> Optional[CarRow]:
        result = await self.db.execute(select(CarRow).where(CarRow.id == car_id))
        return result.scalar_one_or_none()
