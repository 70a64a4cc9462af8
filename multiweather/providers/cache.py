from __future__ import annotations

from typing import Optional

from flask_caching import Cache

KEY_PREFIX = "weather:celsius:"


def city_key(city: str) -> str:
    """Cache key for a city; case and inner whitespace do not create separate entries."""
    return KEY_PREFIX + " ".join(city.split()).casefold()


class CityCache:
    """Average readings per city on top of Flask-Caching.

    Without a backing cache every lookup misses and stores are dropped, so the
    service always fans out.
    """

    def __init__(self, cache: Optional[Cache], timeout_seconds: int) -> None:
        self.cache = cache
        self.timeout_seconds = timeout_seconds

    @property
    def enabled(self) -> bool:
        return self.cache is not None

    def get(self, city: str) -> Optional[float]:
        if self.cache is None:
            return None
        return self.cache.get(city_key(city))

    def set(self, city: str, celsius: float) -> None:
        if self.cache is not None:
            self.cache.set(city_key(city), celsius, timeout=self.timeout_seconds)
