"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from barcodestudio.models.formats import BarcodeFormat


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        env_prefix="BARCODESTUDIO_",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Session defaults
    default_format: BarcodeFormat = BarcodeFormat.CODE39
    default_text: str = "BARCODE123"
    default_scale: float = Field(1.0, gt=0, description="Render scale multiplier")

    # Batch generation
    batch_default_count: int = Field(10, ge=1, description="Random values generated per batch")
    batch_default_length: int = Field(8, ge=1, description="Length of random values")
    batch_max_values: int = Field(1000, ge=1, description="Max values accepted per batch")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
