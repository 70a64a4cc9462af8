from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FuturesTimeoutError, as_completed
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import Settings, get_settings
from ..errors import ConfigurationError, ProviderError, ProviderTimeoutError
from .base import TemperatureProvider, numeric_reading
from .registry import build_providers

logger = logging.getLogger(__name__)


class MultiProvider:
    """Fan a city out to every provider concurrently and average the readings.

    The provider set is fixed at construction. Each call gets its own pool with
    one worker per provider, so concurrent requests never queue behind each
    other. The first failure to come back decides the request: it is re-raised
    at once, the per-request cancel event is set so stragglers discard their
    readings, and the pool is released without waiting. There is no partial
    average.
    """

    name = "multi"

    def __init__(self, providers: Iterable[TemperatureProvider], timeout_seconds: Optional[float] = None) -> None:
        self.providers: Tuple[TemperatureProvider, ...] = tuple(providers)
        if not self.providers:
            raise ConfigurationError("at least one weather provider is required")
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MultiProvider":
        settings = settings or get_settings()
        return cls(build_providers(settings), timeout_seconds=settings.aggregate_timeout_seconds)

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.providers]

    def temperature(self, city: str, cancel: Optional[threading.Event] = None) -> float:
        token = cancel if cancel is not None else threading.Event()
        executor = ThreadPoolExecutor(max_workers=len(self.providers), thread_name_prefix="provider")
        futures: Dict[Future, TemperatureProvider] = {
            executor.submit(p.temperature, city, token): p for p in self.providers
        }

        total = 0.0
        try:
            for future in as_completed(futures, timeout=self.timeout_seconds):
                total += self._reading(futures[future], future.result())
        except FuturesTimeoutError as exc:
            token.set()
            raise ProviderTimeoutError(self.name, f"no answer from all providers within {self.timeout_seconds}s") from exc
        except ProviderError as exc:
            token.set()
            logger.warning("Weather provider %s failed for %s: %s", exc.provider, city, exc)
            raise
        except Exception:
            token.set()
            raise
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return total / len(self.providers)

    @staticmethod
    def _reading(provider: TemperatureProvider, value: float) -> float:
        try:
            return numeric_reading(value)
        except (TypeError, ValueError) as exc:
            raise ProviderError(provider.name, str(exc)) from exc
