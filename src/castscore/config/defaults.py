"""Default configuration values."""

import yaml

from castscore.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()


def get_default_config_content() -> str:
    """Render the default config.yaml contents."""
    header = (
        "# Castscore configuration\n"
        "# Word lists and policy constants for scoring and context selection.\n\n"
    )
    data = DEFAULT_GLOBAL_CONFIG.model_dump(mode="json")
    return header + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
