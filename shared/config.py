"""
Shared configuration management for the Photo Gateway.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # External services
    redis_url: str = Field(default="redis://localhost:6379")
    upstream_base_url: str = Field(default="https://jsonplaceholder.typicode.com")

    # Listen address
    host: str = "0.0.0.0"
    port: int = 3000


class GatewayConfig(BaseConfig):
    """Gateway-specific configuration."""

    # Caching
    cache_ttl_seconds: int = Field(default=3600, gt=0)
    max_cache_key_length: int = Field(default=250, gt=0)

    # Upstream
    upstream_list_timeout: float = Field(default=10.0, gt=0)


def get_config(**overrides) -> GatewayConfig:
    """Get gateway configuration, applying explicit overrides over the environment."""
    return GatewayConfig(**overrides)
