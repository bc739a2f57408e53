"""
Price routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from pricing.schemas import Price
from pricing.service import PriceNotFoundError, PricingService

router = APIRouter(prefix="/services", tags=["prices"])


def get_pricing_service(request: Request) -> PricingService:
    return request.app.state.pricing_service


@router.get("/price", response_model=Price)
async def get_price(
    vehicle_id: int = Query(..., alias="vehicleId"),
    service: PricingService = Depends(get_pricing_service),
):
    """
    Get the price of a vehicle.
    """
    try:
        return service.get_price(vehicle_id)
    except PriceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
