"""
Configuration helpers for the product catalog.

Routers, the app factory and scripts read settings from here instead of
fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_PRODUCTS_FILE = "./products.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    products_file: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        products_file=(os.getenv("PRODUCTS_FILE") or DEFAULT_PRODUCTS_FILE).strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )
