"""
SQLAlchemy database models.
"""
from vehicles.models.car import Car, Condition

__all__ = ["Car", "Condition"]
