"""Runtime configuration loaded from environment variables or defaults."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from eldplanner.hos import HOSLimits

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org"


class Settings(BaseSettings):
    """Trip planner settings, overridable with ``ELD_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ELD_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend_url: str = Field(
        default=DEFAULT_BACKEND_URL,
        description="Base URL of the route-computation backend.",
    )
    timeout: float = Field(default=30.0, gt=0.0, description="Request timeout in seconds.")
    # Not consumed by the transports, which never retry.
    retry_attempts: int = Field(default=3, ge=0)

    geocoder_url: str = Field(
        default=DEFAULT_GEOCODER_URL,
        description="Base URL of the Nominatim-compatible reverse geocoder.",
    )
    geocoder_user_agent: str = Field(default="eld-trip-planner/0.1")
    geocoder_zoom: int = Field(default=16, ge=0, le=18)

    driving_limit_hours: float = Field(default=11.0, ge=0.0)
    on_duty_limit_hours: float = Field(default=14.0, ge=0.0)
    restart_hours: float = Field(default=10.0, ge=0.0)
    weekly_limit_hours: float = Field(default=60.0, ge=0.0)
    eight_day_limit_hours: float = Field(default=70.0, ge=0.0)

    def hos_limits(self) -> HOSLimits:
        """Build the compliance thresholds described by these settings."""
        return HOSLimits(
            driving_hours=self.driving_limit_hours,
            on_duty_hours=self.on_duty_limit_hours,
            restart_hours=self.restart_hours,
            weekly_hours=self.weekly_limit_hours,
            eight_day_hours=self.eight_day_limit_hours,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
