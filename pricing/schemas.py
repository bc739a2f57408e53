"""
Pydantic schemas for the pricing service.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Price(BaseModel):
    """Price of one vehicle."""
    currency: str
    price: float
    vehicle_id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
