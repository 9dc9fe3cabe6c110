"""Configuration module - public API.

Centralized configuration for langline using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings provider (single source of truth)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation lookup settings class

Example:
    ```python
    from langline.configuration import get_settings

    settings = get_settings()
    search_paths = settings.i18n.search_paths
    ```
"""

from functools import lru_cache

from langline.configuration.i18n import I18nSettings
from langline.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """Get process-scoped settings.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Call ``get_settings.cache_clear()`` after changing the environment in tests.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


__all__ = ["Settings", "I18nSettings", "get_settings"]
