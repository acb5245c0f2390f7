"""Default configuration values."""

import yaml

from jbchannel.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()


def get_default_config_content() -> str:
    """Render the default config.yaml contents."""
    header = "# jbchannel configuration\n"
    body = yaml.safe_dump(
        DEFAULT_GLOBAL_CONFIG.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
    )
    return header + body
