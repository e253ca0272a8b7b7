"""Platform-specific paths for Castscore configuration."""

from pathlib import Path

import platformdirs

APP_NAME = "castscore"


def get_config_dir() -> Path:
    """Get the configuration directory (XDG config dir on Linux)."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get the path to config.yaml."""
    return get_config_dir() / "config.yaml"
