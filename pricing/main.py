"""
Pricing service application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from discovery import ServiceRegistryClient, registered
from pricing import routes
from pricing.config import PricingSettings, get_settings
from pricing.service import PricingService
from vehicles.exceptions import validation_error_handler

logger = logging.getLogger(__name__)


def create_app(settings: Optional[PricingSettings] = None) -> FastAPI:
    """Build the pricing service application."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    registry = None
    if settings.registry_enabled:
        registry = ServiceRegistryClient(
            registry_url=settings.registry_url,
            app_name=settings.service_name,
            host=settings.instance_host,
            port=settings.instance_port,
            lease_renewal_interval=settings.lease_renewal_interval,
            timeout_seconds=settings.client_timeout,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", settings.app_name, settings.app_version)
        async with registered(registry):
            yield
        logger.info("Shut down %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Serves the current price of vehicles known to the Vehicles API.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.pricing_service = PricingService(
        max_vehicle_id=settings.max_vehicle_id,
        currency=settings.currency,
        seed=settings.seed,
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(routes.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("pricing.main:app", host="0.0.0.0", port=settings.instance_port)
