"""Configuration module for LeftoverLink."""

from .app_config import (
    APP_CONFIG,
    AppSettings,
    StoreConfig,
    ApiConfig,
    get_app_settings,
)

__all__ = [
    'APP_CONFIG',
    'AppSettings',
    'StoreConfig',
    'ApiConfig',
    'get_app_settings',
]
