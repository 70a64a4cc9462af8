from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from ..config import Settings, get_settings
from ..errors import CityNotFoundError, ProviderError
from .base import HttpTemperatureProvider, numeric_reading


class WeatherUndergroundProvider(HttpTemperatureProvider):
    """Current observation from Weather Underground, already in Celsius."""

    name = "weatherunderground"

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        super().__init__(
            api_key=settings.api_key_weatherunderground,
            base_url=settings.weatherunderground_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )

    def _request(self, city: str) -> Tuple[str, Optional[Dict[str, str]]]:
        return f"{self.base_url}/{quote(self.api_key, safe='')}/conditions/q/{quote(city, safe='')}.json", None

    def _parse(self, payload: Any, city: str) -> float:
        # Errors come back as HTTP 200 with {"response": {"error": {"type": ..., "description": ...}}}
        error = (payload.get("response") or {}).get("error")
        if error:
            if error.get("type") == "querynotfound":
                raise CityNotFoundError(self.name, f"city not found: {city}", status_code=404)
            raise ProviderError(self.name, error.get("description") or error.get("type") or "upstream error")
        return numeric_reading(payload["current_observation"]["temp_c"])
