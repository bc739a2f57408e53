"""
Configuration settings for the pricing service.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class PricingSettings(BaseSettings):
    """Pricing settings loaded from PRICING_* environment variables."""

    app_name: str = "Pricing Service"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Prices are generated for vehicle ids 1..max_vehicle_id
    max_vehicle_id: int = 19
    currency: str = "USD"
    seed: Optional[int] = None
    client_timeout: float = 5.0

    # Service registry
    registry_enabled: bool = False
    registry_url: str = "http://localhost:8761/eureka"
    service_name: str = "pricing-service"
    instance_host: str = "localhost"
    instance_port: int = 8082
    lease_renewal_interval: int = 30

    model_config = SettingsConfigDict(env_prefix="PRICING_", env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> PricingSettings:
    """Get cached settings instance."""
    return PricingSettings()
