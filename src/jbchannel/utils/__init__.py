"""Utility functions and helpers for jbchannel."""

from jbchannel.utils.errors import (
    CatalogError,
    ConfigError,
    FeedError,
    FeedUnavailableError,
    InvalidConfigError,
    JBChannelError,
    UnknownShowError,
    UnsupportedImageTypeError,
)
from jbchannel.utils.paths import get_config_dir, get_config_file

__all__ = [
    # Errors
    "JBChannelError",
    "ConfigError",
    "InvalidConfigError",
    "CatalogError",
    "UnknownShowError",
    "UnsupportedImageTypeError",
    "FeedError",
    "FeedUnavailableError",
    # Paths
    "get_config_dir",
    "get_config_file",
]
