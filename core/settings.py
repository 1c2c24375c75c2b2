"""
Application settings and configuration management using Pydantic Settings.
"""
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="SpotHopper Reservation CLI", description="Application name")
    app_env: str = Field(default="development", description="Environment (development, staging, production)")
    log_level: str = Field(default="WARNING", description="Logging level")

    # Restaurant Configuration
    restaurant_timezone: str = Field(default="America/New_York", description="Timezone used to decide 'today'")
    reservation_venue: str = Field(default="slainte", description="Venue key from the venue table")
    reservation_space: Optional[str] = Field(default=None, description="Override for the venue's seating space")
    texting_permission: Optional[bool] = Field(default=None, description="Override for the venue's texting consent default")

    # SpotHopper API
    spothopper_base_url: str = Field(
        default="https://www.spothopperapp.com/api",
        description="SpotHopper API base URL"
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP request timeout")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed_levels:
            raise ValueError(f"log_level must be one of {allowed_levels}")
        return v_upper

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate environment is one of the allowed values."""
        allowed_envs = ["development", "staging", "production"]
        v_lower = v.lower()
        if v_lower not in allowed_envs:
            raise ValueError(f"app_env must be one of {allowed_envs}")
        return v_lower


# Global settings instance
settings = Settings()
