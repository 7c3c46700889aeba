"""Application configuration settings for LeftoverLink."""

from dataclasses import dataclass, field
from typing import List
import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class StoreConfig:
    """Listing store configuration."""
    seed_sample_data: bool = True
    name: str = "listings"


@dataclass
class ApiConfig:
    """HTTP API configuration."""
    title: str = "LeftoverLink API"
    version: str = "0.1.0"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class AppSettings:
    """Main application settings."""
    log_level: str = "INFO"
    store: StoreConfig = None
    api: ApiConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.store is None:
            self.store = StoreConfig()
        if self.api is None:
            self.api = ApiConfig()


# Default application configuration
APP_CONFIG = {
    "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    "store": {
        "seed_sample_data": _env_bool("SEED_SAMPLE_DATA", "true"),
        "name": os.getenv("STORE_NAME", "listings"),
    },
    "api": {
        "title": os.getenv("API_TITLE", "LeftoverLink API"),
        "version": "0.1.0",
        "cors_allow_origins": _env_list("CORS_ALLOW_ORIGINS", "*"),
    },
}


def get_app_settings() -> AppSettings:
    """Get application settings from configuration."""
    return AppSettings(
        log_level=APP_CONFIG["log_level"],
        store=StoreConfig(**APP_CONFIG["store"]),
        api=ApiConfig(**APP_CONFIG["api"]),
    )
