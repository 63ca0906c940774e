"""Service settings loaded from the environment (``BOOKING_*``) or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESOURCES = ["Dental", "Emergency Care", "Medicine", "Pediatrics", "Surgery"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOOKING_", env_file=".env", extra="ignore"
    )

    resources: list[str] = Field(default_factory=lambda: list(DEFAULT_RESOURCES))

    # Turnaround time added around every existing booking
    buffer_minutes: int = Field(default=10, ge=0)
    min_duration_minutes: int = Field(default=15, gt=0)
    max_duration_minutes: int = Field(default=120, gt=0)
    slot_minutes: int = Field(default=15, gt=0)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
