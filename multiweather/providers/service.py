from __future__ import annotations

import logging
from typing import List, Optional

from flask_caching import Cache

from ..config import Settings, get_settings
from .aggregator import MultiProvider
from .cache import CityCache

logger = logging.getLogger(__name__)


class WeatherService:
    """Average Celsius temperature per city, backed by the aggregator and an optional cache."""

    def __init__(
        self,
        aggregator: Optional[MultiProvider] = None,
        city_cache: Optional[CityCache] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.aggregator = aggregator or MultiProvider.from_settings(self.settings)
        self.city_cache = city_cache or CityCache(cache=None, timeout_seconds=self.settings.cache_timeout_seconds)

    @property
    def provider_names(self) -> List[str]:
        return self.aggregator.names

    def temperature_uncached(self, city: str) -> float:
        return self.aggregator.temperature(city)

    def temperature(self, city: str) -> float:
        cached = self.city_cache.get(city)
        if cached is not None:
            logger.debug("cache hit for %s", city)
            return cached
        # Failures propagate before anything is stored.
        celsius = self.temperature_uncached(city)
        self.city_cache.set(city, celsius)
        return celsius

    def set_cache(self, cache: Optional[Cache]) -> None:
        self.city_cache = CityCache(cache, timeout_seconds=self.settings.cache_timeout_seconds)
