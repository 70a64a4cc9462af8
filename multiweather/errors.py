"""Exception hierarchy for the weather aggregation service.

Every error raised on purpose derives from `WeatherError`, so the HTTP layer
can map the whole family to responses while genuine bugs still surface as 500s
through Flask's default handling.
"""
from typing import Optional


class WeatherError(Exception):
    """Base class for errors raised by the service."""


class ConfigurationError(WeatherError):
    """Raised at startup when the provider set cannot be built."""


class InvalidCityError(WeatherError):
    """Raised when the request does not carry a usable city."""


class ProviderError(WeatherError):
    """An upstream provider could not produce a reading."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.status_code = status_code


class CityNotFoundError(ProviderError):
    """The upstream provider does not know the requested city."""


class ProviderTimeoutError(ProviderError):
    """A provider call (or the whole fan-out) ran past its deadline."""


class ProviderCancelledError(ProviderError):
    """A reading was discarded because the request was already decided."""
