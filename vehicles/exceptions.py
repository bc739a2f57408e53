"""
Domain exceptions and their HTTP translations.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CarNotFoundError(Exception):
    """Raised when a car id is not present in the store."""

    def __init__(self, car_id: int):
        self.car_id = car_id
        super().__init__(f"Car {car_id} not found")


REQUEST_SECTIONS = ("body", "query", "path", "header", "cookie")


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into field/message pairs."""
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        # Leading segment names the request part, not a field
        if loc and loc[0] in REQUEST_SECTIONS:
            loc = loc[1:]
        loc = [str(part) for part in loc]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "invalid value"),
        })
    return errors


async def car_not_found_handler(request: Request, exc: CarNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Car not found"},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CarNotFoundError, car_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
