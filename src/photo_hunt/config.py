"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from photo_hunt.domain.photos import DEFAULT_THUMBNAIL_SIZE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    app_base_url: str
    image_bucket: str = "photos"
    thumbnail_size: int = DEFAULT_THUMBNAIL_SIZE
    timezone: str = "UTC"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes so paths can be appended."""
    return raw.strip().rstrip("/")
