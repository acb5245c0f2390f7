"""Feed retrieval and raw entry models for jbchannel."""

from jbchannel.feeds.duration import parse_duration, parse_duration_ticks, to_ticks
from jbchannel.feeds.fetcher import FeedFetcher, parse_feed_document
from jbchannel.feeds.models import FeedDocument, RawFeedEntry

__all__ = [
    "FeedFetcher",
    "FeedDocument",
    "RawFeedEntry",
    "parse_feed_document",
    "parse_duration",
    "parse_duration_ticks",
    "to_ticks",
]
