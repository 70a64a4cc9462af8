from typing import Any, Dict, Optional, Tuple

from ..config import Settings, get_settings
from ..utils import kelvin_to_celsius
from .base import HttpTemperatureProvider, numeric_reading


class OpenWeatherMapProvider(HttpTemperatureProvider):
    """Current conditions from OpenWeatherMap, reported in Kelvin and normalized to Celsius."""

    name = "openweathermap"

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        super().__init__(
            api_key=settings.api_key_openweathermap,
            base_url=settings.openweathermap_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )

    def _request(self, city: str) -> Tuple[str, Optional[Dict[str, str]]]:
        return self.base_url, {"APPID": self.api_key, "q": city}

    def _parse(self, payload: Any, city: str) -> float:
        # {"main": {"temp": 300.15, ...}, ...}
        return kelvin_to_celsius(numeric_reading(payload["main"]["temp"]))
