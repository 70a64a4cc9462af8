import pytest
from pydantic import ValidationError

from multiweather.config import Settings


def test_settings_env_var_precedence(monkeypatch):
    """Test that environment variables take precedence over .env file."""
    monkeypatch.setenv("API_KEY_OpenWeatherMap", "FromEnvVar")
    s = Settings()
    assert s.api_key_openweathermap == "FromEnvVar"


def test_settings_aliases_env(monkeypatch):
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "2.5")
    s = Settings()
    assert s.port == 8123
    assert s.debug is True
    assert s.log_level == "WARNING"
    assert s.provider_timeout_seconds == 2.5


def test_provider_names_are_ordered_and_normalized():
    s = Settings(providers=" WeatherUnderground , openweathermap,, ")
    assert s.provider_names() == ["weatherunderground", "openweathermap"]


def test_blank_providers_yield_no_names():
    assert Settings(providers="").provider_names() == []


def test_direct_instantiation_defaults():
    s = Settings()
    assert s.log_level == "DEBUG"  # from conftest
    assert s.cache_type in ("NullCache", "SimpleCache", "RedisCache")


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings()
