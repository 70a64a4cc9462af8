from __future__ import annotations

import logging
import math
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, Tuple

import requests

from ..errors import CityNotFoundError, ProviderCancelledError, ProviderError, ProviderTimeoutError

logger = logging.getLogger(__name__)


def numeric_reading(value: Any) -> float:
    """Accept only finite JSON numbers; strings, booleans, NaN and infinities are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"temperature is not a number: {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"temperature is not finite: {value!r}")
    return float(value)


class TemperatureProvider(Protocol):
    """Protocol for providers returning a Celsius reading for a city."""

    name: str

    def temperature(self, city: str, cancel: Optional[threading.Event] = None) -> float: ...


class HttpTemperatureProvider(ABC):
    """Shared plumbing for providers backed by a single JSON GET request.

    Subclasses describe the request (`_request`) and pull the Celsius value
    out of the decoded body (`_parse`); everything else (timeouts, status
    handling, decode failures, cancellation, logging) lives here.
    """

    name = "http"

    def __init__(self, api_key: str, base_url: str, timeout_seconds: float) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        if not api_key:
            logger.warning("No API key configured for %s; upstream calls will likely be rejected", self.name)

    @abstractmethod
    def _request(self, city: str) -> Tuple[str, Optional[Dict[str, str]]]: ...

    @abstractmethod
    def _parse(self, payload: Any, city: str) -> float: ...

    def temperature(self, city: str, cancel: Optional[threading.Event] = None) -> float:
        self._check_cancelled(cancel)
        url, params = self._request(city)
        try:
            resp = requests.get(url, params=params, timeout=self.timeout_seconds)
        except requests.Timeout as exc:
            raise ProviderTimeoutError(self.name, f"no response within {self.timeout_seconds}s") from exc
        except requests.RequestException as exc:
            raise ProviderError(self.name, f"request failed: {exc}") from exc

        if resp.status_code == 404:
            raise CityNotFoundError(self.name, f"city not found: {city}", status_code=404)
        if not 200 <= resp.status_code < 300:
            raise ProviderError(self.name, f"upstream returned HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise ProviderError(self.name, "response body is not valid JSON") from exc

        try:
            celsius = self._parse(payload, city)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ProviderError(self.name, f"unexpected response shape: {exc!r}") from exc

        self._check_cancelled(cancel)
        logger.info("%s: %s: %.2f", self.name, city, celsius)
        return celsius

    def _check_cancelled(self, cancel: Optional[threading.Event]) -> None:
        if cancel is not None and cancel.is_set():
            logger.debug("%s: request abandoned", self.name)
            raise ProviderCancelledError(self.name, "request abandoned")
