"""
Shared configuration management for the string access services.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="STRINGS_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Last-response cache (Redis)
    redis_url: str = Field(default="redis://127.0.0.1:6379/0")
    cache_key_prefix: str = Field(default="last_response:")
    cache_ttl_seconds: Optional[int] = Field(default=None)

    # Identity service
    identity_service_url: str = Field(default="https://interview-api.shiftboard.com/auth")
    identity_timeout_seconds: float = Field(default=10.0)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
