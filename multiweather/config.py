from pathlib import Path
from typing import List, Optional, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =========================
# Configuration (ENV-DRIVEN via Pydantic)
# =========================


class Settings(BaseSettings):
    """Service settings read from environment and validated by Pydantic.

    Only a single `.env` file at the project root is read. Real environment
    variables always take precedence over `.env` values. Built once at startup
    and handed explicitly to the server factory, the service and the aggregator.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=str(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
    )

    # Server
    port: int = Field(default=8080, ge=1, le=65535, alias="PORT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", alias="LOG_LEVEL")

    # Providers
    providers: str = Field(default="openweathermap,weatherunderground", alias="PROVIDERS")
    api_key_openweathermap: str = Field(default="", alias="API_KEY_OpenWeatherMap")
    api_key_weatherunderground: str = Field(default="", alias="API_KEY_WeatherUnderground")
    openweathermap_url: str = Field(
        default="http://api.openweathermap.org/data/2.5/weather", alias="OPENWEATHERMAP_URL"
    )
    weatherunderground_url: str = Field(default="http://api.wunderground.com/api", alias="WEATHERUNDERGROUND_URL")

    # Fan-out
    provider_timeout_seconds: float = Field(default=5.0, gt=0, alias="PROVIDER_TIMEOUT_SECONDS")
    aggregate_timeout_seconds: float = Field(default=10.0, gt=0, alias="AGGREGATE_TIMEOUT_SECONDS")

    # Cache
    cache_type: Literal["NullCache", "SimpleCache", "RedisCache"] = Field(default="NullCache", alias="CACHE_TYPE")
    cache_timeout_seconds: int = Field(default=60, ge=0, alias="CACHE_TIMEOUT_SECONDS")
    redis_url: Optional[str] = Field(default=None, alias="REDIS_URL")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def provider_names(self) -> List[str]:
        """Ordered, lower-cased provider names from the comma-separated PROVIDERS value."""
        return [name.strip().lower() for name in self.providers.split(",") if name.strip()]


# Singleton accessor to avoid repeated disk reads/parsing
_settings_singleton: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the singleton Settings instance, initializing it on first call."""
    global _settings_singleton
    if _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton


# Convenience module-level constants used by app.py when running as a script
PORT: int = get_settings().port
DEBUG: bool = get_settings().debug
