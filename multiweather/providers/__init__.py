"""Provider layer: upstream clients, the concurrent aggregator, cache facade and service.

Public exports:
- TemperatureProvider protocol
- OpenWeatherMapProvider, WeatherUndergroundProvider
- MultiProvider
- CityCache
- WeatherService
"""
from .base import TemperatureProvider
from .openweathermap import OpenWeatherMapProvider
from .weatherunderground import WeatherUndergroundProvider
from .registry import PROVIDER_REGISTRY, build_providers
from .aggregator import MultiProvider
from .cache import CityCache
from .service import WeatherService

__all__ = [
    "TemperatureProvider",
    "OpenWeatherMapProvider",
    "WeatherUndergroundProvider",
    "PROVIDER_REGISTRY",
    "build_providers",
    "MultiProvider",
    "CityCache",
    "WeatherService",
]
