"""
Car model for database.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from vehicles.database import Base
import enum


class Condition(str, enum.Enum):
    """Vehicle condition enumeration."""
    USED = "USED"
    NEW = "NEW"


class Car(Base):
    """Car database model. Details and location are stored inline."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, index=True)
    condition = Column(SQLEnum(Condition), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Details
    body = Column(String, nullable=False)
    model = Column(String, nullable=False)
    manufacturer_code = Column(Integer, nullable=False)
    manufacturer_name = Column(String, nullable=True)
    number_of_doors = Column(Integer, nullable=True)
    fuel_type = Column(String, nullable=True)
    engine = Column(String, nullable=True)
    mileage = Column(Integer, nullable=True)
    model_year = Column(Integer, nullable=True)
    production_year = Column(Integer, nullable=True)
    external_color = Column(String, nullable=True)

    # Location
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
