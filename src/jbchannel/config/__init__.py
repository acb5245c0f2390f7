"""Configuration management for jbchannel."""

from jbchannel.config.manager import ConfigManager
from jbchannel.config.schema import AggregationConfig, GlobalConfig, HttpConfig

__all__ = ["ConfigManager", "GlobalConfig", "HttpConfig", "AggregationConfig"]
