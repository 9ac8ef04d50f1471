"""Configuration module using Pydantic Settings.

Provides typed store configuration with environment variable support.

Usage:
    from indexstore.config import StoreSettings

    settings = StoreSettings(max_index=1_000_000)
    store = IndexedStore.from_settings(settings)
"""

from indexstore.config.settings import StoreSettings

__all__ = [
    "StoreSettings",
]
