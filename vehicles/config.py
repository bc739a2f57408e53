"""
Configuration settings for the Vehicles API.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Vehicles API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://vehicles_user:vehicles_pass@db:5432/vehicles_db"

    # Collaborators
    pricing_url: str = "http://localhost:8082"
    maps_url: str = "http://localhost:9191"
    client_timeout: float = 5.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Service registry
    registry_enabled: bool = False
    registry_url: str = "http://localhost:8761/eureka"
    service_name: str = "vehicles-api"
    instance_host: str = "localhost"
    instance_port: int = 8080
    lease_renewal_interval: int = 30

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
