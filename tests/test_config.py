"""Tests for configuration module."""

import importlib

from leftover_link.config import (
    APP_CONFIG,
    AppSettings,
    StoreConfig,
    ApiConfig,
    get_app_settings,
)


def test_app_config_exists():
    """Test that APP_CONFIG dictionary is properly defined."""
    assert isinstance(APP_CONFIG, dict)
    assert "log_level" in APP_CONFIG
    assert "store" in APP_CONFIG
    assert "api" in APP_CONFIG


def test_get_app_settings():
    """Test that get_app_settings returns proper AppSettings object."""
    settings = get_app_settings()

    assert isinstance(settings, AppSettings)
    assert isinstance(settings.store, StoreConfig)
    assert isinstance(settings.api, ApiConfig)
    assert settings.api.version == "0.1.0"


def test_dataclass_initialization():
    """Test that all config dataclasses can be initialized with defaults."""
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.store.seed_sample_data is True
    assert settings.store.name == "listings"
    assert settings.api.title == "LeftoverLink API"
    assert settings.api.cors_allow_origins == ["*"]


def test_app_settings_with_custom_values():
    settings = AppSettings(log_level="DEBUG", store=StoreConfig(seed_sample_data=False))

    assert settings.log_level == "DEBUG"
    assert settings.store.seed_sample_data is False
    assert isinstance(settings.api, ApiConfig)


def test_environment_variable_override(monkeypatch):
    """Environment variables are read when the config module is loaded."""
    from leftover_link.config import app_config

    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000, https://example.org")
    try:
        reloaded = importlib.reload(app_config)
        settings = reloaded.get_app_settings()

        assert settings.store.seed_sample_data is False
        assert settings.log_level == "DEBUG"
        assert settings.api.cors_allow_origins == ["http://localhost:3000", "https://example.org"]
    finally:
        monkeypatch.delenv("SEED_SAMPLE_DATA")
        monkeypatch.delenv("LOG_LEVEL")
        monkeypatch.delenv("CORS_ALLOW_ORIGINS")
        importlib.reload(app_config)
