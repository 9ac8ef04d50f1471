"""Configuration settings using Pydantic Settings.

Usage:
    from indexstore.config import StoreSettings

    # Load from environment variables (INDEXSTORE_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(max_index=65536, warn_ratio=0.75)
"""

from __future__ import annotations

import sys

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install indexstore[config]"
    ) from e


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for IndexedStore instances.

    Attributes:
        max_index: Number of indices a store may assign before
            IndexExhaustedError is raised.
        warn_ratio: Fraction of max_index after which a ResourceWarning is emitted.

    Environment Variables:
        INDEXSTORE_MAX_INDEX
        INDEXSTORE_WARN_RATIO
    """

    model_config = SettingsConfigDict(
        env_prefix="INDEXSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_index: int = Field(default=sys.maxsize, ge=1)
    warn_ratio: float = Field(default=0.9, gt=0.0, le=1.0)
