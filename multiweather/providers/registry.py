from typing import Dict, List, Type

from ..config import Settings
from ..errors import ConfigurationError
from .base import HttpTemperatureProvider, TemperatureProvider
from .openweathermap import OpenWeatherMapProvider
from .weatherunderground import WeatherUndergroundProvider

PROVIDER_REGISTRY: Dict[str, Type[HttpTemperatureProvider]] = {
    OpenWeatherMapProvider.name: OpenWeatherMapProvider,
    WeatherUndergroundProvider.name: WeatherUndergroundProvider,
}


def build_providers(settings: Settings) -> List[TemperatureProvider]:
    """Instantiate the providers named in PROVIDERS, in order."""
    names = settings.provider_names()
    unknown = [n for n in names if n not in PROVIDER_REGISTRY]
    if unknown:
        raise ConfigurationError(
            f"unknown weather provider(s): {', '.join(unknown)}; expected one of {', '.join(PROVIDER_REGISTRY)}"
        )
    return [PROVIDER_REGISTRY[n](settings) for n in names]
