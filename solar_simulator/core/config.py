"""
Core Configuration Module
Uses pydantic-settings for environment variable management.
Values are read from the environment or a local .env file.
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    project_name: str = "Solar Simulator"
    environment: str = Field(default="development", description="development | production")
    debug: bool = Field(default=False)
    app_version: str = Field(default="1.0.0", description="Application version")
    api_v1_str: str = "/api/v1"

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Listening TCP port")

    # Generator
    tick_interval_seconds: float = Field(default=2.0, gt=0, description="Seconds between generator ticks")
    anomaly_probability: float = Field(default=0.10, ge=0, le=1, description="Anomaly chance per farm per tick")
    system_efficiency: float = Field(default=0.85, gt=0, le=1, description="Overall system efficiency")
    timezone: str = Field(default="", description="IANA time zone for the simulated clock, empty = local time")
    seed: int | None = Field(default=None, description="Seed for reproducible runs")

    # Farms
    farms_file: str = Field(default="", description="JSON file with the farm list, empty = default fleet")

    # Sentry (Error Tracking)
    sentry_dsn: str = Field(default="", description="Sentry DSN for error tracking")
    sentry_traces_sample_rate: float = Field(default=0.1, ge=0, le=1, description="Sentry traces sample rate")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, value: str) -> str:
        value = value.lower()
        if value not in ("development", "production"):
            raise ValueError("environment must be 'development' or 'production'")
        return value

    @property
    def metrics_url(self) -> str:
        """URL advertised in the startup log."""
        host = "localhost" if self.host in ("0.0.0.0", "::") else self.host
        return f"http://{host}:{self.port}/metrics"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
