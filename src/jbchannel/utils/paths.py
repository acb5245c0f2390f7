"""Filesystem locations used by jbchannel."""

import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "jbchannel"
CONFIG_DIR_ENV = "JBCHANNEL_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Honors ``JBCHANNEL_CONFIG_DIR`` when set, otherwise the platform's
    user config directory.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Get the path to config.yaml."""
    return get_config_dir() / "config.yaml"
