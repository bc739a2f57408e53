"""
Business services.
"""
from vehicles.services.car_service import CarService

__all__ = ["CarService"]
