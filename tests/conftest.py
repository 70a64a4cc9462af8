import os
import threading
import time
from typing import List, Optional

import pytest
from flask import Flask

# Ensure predictable environment before importing the service
os.environ.setdefault("PORT", "8060")  # test port
os.environ.setdefault("DEBUG", "0")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("PROVIDERS", "openweathermap,weatherunderground")
os.environ.setdefault("API_KEY_OpenWeatherMap", "test-owm-key")
os.environ.setdefault("API_KEY_WeatherUnderground", "test-wu-key")
os.environ.setdefault("CACHE_TYPE", "NullCache")
os.environ.setdefault("CACHE_TIMEOUT_SECONDS", "5")


class StubProvider:
    """In-process provider with an optional delay, failure and cancellation bookkeeping."""

    def __init__(self, name: str, celsius: float = 0.0, error: Optional[Exception] = None, delay: float = 0.0) -> None:
        self.name = name
        self.celsius = celsius
        self.error = error
        self.delay = delay
        self.calls: List[str] = []
        self.discarded = False
        self.finished = threading.Event()

    def temperature(self, city: str, cancel: Optional[threading.Event] = None) -> float:
        from multiweather.errors import ProviderCancelledError

        try:
            self.calls.append(city)
            time.sleep(self.delay)
            if self.error is not None:
                raise self.error
            if cancel is not None and cancel.is_set():
                self.discarded = True
                raise ProviderCancelledError(self.name, "request abandoned")
            return self.celsius
        finally:
            self.finished.set()


class FakeResp:
    def __init__(self, obj=None, status_code: int = 200, bad_json: bool = False):
        self._obj = obj
        self.status_code = status_code
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._obj


@pytest.fixture
def stub_provider():
    return StubProvider


@pytest.fixture
def fake_resp():
    return FakeResp


@pytest.fixture(scope="session")
def flask_server() -> Flask:
    """Import the package after env is set; expose the assembled Flask server."""
    # Import delayed so config reads env just set above
    from multiweather import server  # noqa: WPS433 (import inside function)
    return server


@pytest.fixture(scope="session")
def flask_client(flask_server):
    return flask_server.test_client()


@pytest.fixture
def make_client():
    """Build a server whose service is backed by the given providers."""
    from multiweather.config import Settings
    from multiweather.providers import MultiProvider, WeatherService
    from multiweather.routes import register_routes
    from multiweather.server import ServerFactory

    def _make(providers, **settings_overrides):
        settings = Settings(**settings_overrides)
        server = ServerFactory(settings).create_server()
        service = WeatherService(aggregator=MultiProvider(providers, timeout_seconds=2.0), settings=settings)
        register_routes(server, service)
        return server.test_client()

    return _make
