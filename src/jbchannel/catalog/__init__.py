"""Show catalog, normalization and cross-show aggregation."""

from jbchannel.catalog.aggregator import Aggregator, FetchOutcome
from jbchannel.catalog.channel import JupiterChannel, build_channel
from jbchannel.catalog.models import (
    AllMediaQuery,
    CatalogPage,
    ChannelQuery,
    ContentType,
    FolderItem,
    ImageType,
    LatestMediaQuery,
    MediaItem,
    Show,
)
from jbchannel.catalog.normalizer import normalize_entry
from jbchannel.catalog.registry import ShowRegistry
from jbchannel.catalog.service import CatalogService

__all__ = [
    "Aggregator",
    "FetchOutcome",
    "CatalogService",
    "JupiterChannel",
    "build_channel",
    "ShowRegistry",
    "normalize_entry",
    "Show",
    "MediaItem",
    "FolderItem",
    "CatalogPage",
    "ContentType",
    "ImageType",
    "ChannelQuery",
    "AllMediaQuery",
    "LatestMediaQuery",
]
