"""
Catalog Cache Application Configuration

Configuration management with environment variable support.
Implements secure defaults and validation for all settings.
"""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import CATALOG_REGION_NAME

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation and secure defaults."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # Environment settings
    ENVIRONMENT: str = Field(
        default="development", description="Application environment"
    )

    # Cache configuration
    CACHE_BACKEND: str = Field(
        default="memory", description="Cache store backend (memory or redis)"
    )
    CACHE_REGION_NAME: str = Field(
        default=CATALOG_REGION_NAME,
        min_length=1,
        description="Region holding every cached catalog read",
    )

    # Redis configuration
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0", description="Redis connection URL"
    )
    REDIS_KEY_PREFIX: str = Field(
        default="catalog-cache", description="Prefix for every Redis key"
    )
    REDIS_SOCKET_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Redis socket timeout in seconds"
    )
    REDIS_REGION_TTL_SECONDS: Optional[int] = Field(
        default=None,
        ge=1,
        le=86400 * 30,
        description="Optional expiry applied to a region hash after each store",
    )

    # OpenTelemetry configuration
    OTEL_ENABLED: bool = Field(default=False, description="Enable span export")
    OTEL_SERVICE_NAME: str = Field(
        default="catalog-cache", description="OpenTelemetry service name"
    )
    OTEL_EXPORTER_OTLP_ENDPOINT: str = Field(
        default="http://localhost:4317", description="OpenTelemetry OTLP endpoint"
    )

    # Development and debugging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON: bool = Field(default=True, description="Render logs as JSON")

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v

    @field_validator("CACHE_BACKEND")
    @classmethod
    def validate_cache_backend(cls, v):
        """Validate cache backend value."""
        allowed = ["memory", "redis"]
        if v.lower() not in allowed:
            raise ValueError(f"CACHE_BACKEND must be one of: {allowed}")
        return v.lower()

    @field_validator("CACHE_REGION_NAME")
    @classmethod
    def validate_cache_region_name(cls, v):
        """Validate cache region name."""
        if len(v) > 100:
            raise ValueError("CACHE_REGION_NAME too long (max 100 characters)")
        if any(char.isspace() for char in v):
            raise ValueError("CACHE_REGION_NAME cannot contain whitespace")
        return v

    @field_validator("REDIS_URL")
    @classmethod
    def validate_redis_url(cls, v):
        """Validate Redis URL format."""
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError("REDIS_URL must be a redis://, rediss:// or unix:// URL")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def uses_redis(self) -> bool:
        """Check if the Redis cache backend is selected."""
        return self.CACHE_BACKEND == "redis"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
