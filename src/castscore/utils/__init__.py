"""Utility functions and helpers for Castscore."""

from castscore.utils.errors import (
    CastscoreError,
    CatalogError,
    ChannelNotFoundError,
    ConfigError,
    InvalidConfigError,
    SnapshotLoadError,
    ValidationError,
)
from castscore.utils.paths import (
    get_config_dir,
    get_config_file,
)

__all__ = [
    # Errors
    "CastscoreError",
    "ConfigError",
    "InvalidConfigError",
    "CatalogError",
    "SnapshotLoadError",
    "ChannelNotFoundError",
    "ValidationError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
