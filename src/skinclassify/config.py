"""Environment-based configuration for SkinClassify."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from SKINCLASSIFY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SKINCLASSIFY_",
        case_sensitive=False,
    )

    # Classification service
    endpoint_url: str = "http://127.0.0.1:8000/upload"
    request_timeout: float = Field(default=30.0, gt=0)
    upload_field_name: str = Field(default="file", min_length=1)

    # Fallback when the picked locator carries no usable extension
    default_extension: str = Field(default="jpg", min_length=1)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def get_settings() -> Settings:
    """Create and return client settings."""
    return Settings()
