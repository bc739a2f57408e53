"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discovery import ServiceRegistryClient, registered
from vehicles.config import Settings, get_settings
from vehicles.database import Database
from vehicles.exceptions import register_exception_handlers
from vehicles.routers import cars

logger = logging.getLogger(__name__)


def build_registry_client(settings: Settings) -> Optional[ServiceRegistryClient]:
    if not settings.registry_enabled:
        return None
    return ServiceRegistryClient(
        registry_url=settings.registry_url,
        app_name=settings.service_name,
        host=settings.instance_host,
        port=settings.instance_port,
        lease_renewal_interval=settings.lease_renewal_interval,
        timeout_seconds=settings.client_timeout,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the Vehicles API application."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan events for the application.
        Handles startup and shutdown events.
        """
        logger.info("Starting %s %s", settings.app_name, settings.app_version)
        database = Database(settings.database_url, echo=settings.debug)
        await database.create_tables()
        app.state.database = database

        async with registered(build_registry_client(settings)):
            yield

        await database.dispose()
        logger.info("Shut down %s", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        ## Vehicles API

        Maintains vehicle records and decorates them with the current price
        from the pricing service and a street address from the maps service.
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(cars.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "vehicles.main:app",
        host="0.0.0.0",
        port=settings.instance_port,
        reload=settings.debug,
    )
