"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str = "DEMO_KEY"
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_data_types: str = "Foundation,SR Legacy"
    fdc_page_size: int = 20
    off_base_url: str = "https://world.openfoodfacts.org"
    off_page_size: int = 10
    result_limit: int = Field(default=8, ge=0, le=8)
    provider_timeout_seconds: float = Field(default=8.0, gt=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_data_types(raw: str | None) -> list[str]:
    """Parse a comma-separated list of FDC data types."""
    if raw is None:
        return []
    return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
