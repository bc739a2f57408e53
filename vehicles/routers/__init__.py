"""
API routers.
"""
from vehicles.routers import cars

__all__ = ["cars"]
