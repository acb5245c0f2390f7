"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_USER_AGENT = "jbchannel/0.1 (+https://www.jupiterbroadcasting.com)"


class HttpConfig(BaseModel):
    """HTTP transport configuration for feed fetching."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True


class AggregationConfig(BaseModel):
    """Cross-feed aggregation settings."""

    # One slot per registered show, so every feed is fetched at once.
    max_concurrent_feeds: int = Field(default=11, ge=1)


class GlobalConfig(BaseModel):
    """Global jbchannel configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"

    http: HttpConfig = Field(default_factory=HttpConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)
