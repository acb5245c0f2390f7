"""Host-facing Jupiter Broadcasting channel.

Bundles channel metadata, advertised features and image lookups with the
catalog and aggregation operations. Instances are built explicitly and
passed to callers; there is no process-wide instance.
"""

import logging

import httpx

from jbchannel.catalog.aggregator import Aggregator
from jbchannel.catalog.models import (
    AllMediaQuery,
    CatalogPage,
    ChannelFeatures,
    ChannelImage,
    ChannelQuery,
    ContentType,
    ImageFormat,
    ImageType,
    LatestMediaQuery,
    MediaItem,
    MediaType,
    ParentalRating,
    SortField,
)
from jbchannel.catalog.registry import ARTWORK_BASE_URL, ShowRegistry
from jbchannel.catalog.service import CatalogService
from jbchannel.config.schema import GlobalConfig
from jbchannel.feeds.fetcher import FeedFetcher
from jbchannel.utils.errors import UnsupportedImageTypeError

logger = logging.getLogger(__name__)

CHANNEL_NAME = "Jupiter Broadcasting"
HOME_PAGE_URL = "http://www.jupiterbroadcasting.com"
# Increment to invalidate host-side caches.
DATA_VERSION = "2"
MAX_PAGE_SIZE = 100

_CHANNEL_IMAGES: dict[ImageType, tuple[ImageFormat, str]] = {
    ImageType.THUMB: (ImageFormat.PNG, "thumb.png"),
    ImageType.PRIMARY: (ImageFormat.PNG, "jupiterbroadcasting.png"),
    ImageType.BACKDROP: (ImageFormat.JPG, "jupiterbackdrop.jpg"),
}


class JupiterChannel:
    """The channel as seen by the hosting media catalog.

    Example:
        >>> async with build_channel() as channel:
        ...     page = await channel.get_channel_items(ChannelQuery())
        >>> [item.id for item in page.items][:3]
        ['faux', 'scibyte', 'unfilter']
    """

    name = CHANNEL_NAME
    description = ""
    data_version = DATA_VERSION
    home_page_url = HOME_PAGE_URL
    parental_rating = ParentalRating.GENERAL_AUDIENCE

    def __init__(
        self,
        registry: ShowRegistry,
        fetcher: FeedFetcher,
        max_concurrent_feeds: int | None = None,
    ) -> None:
        self.registry = registry
        self.fetcher = fetcher
        self.catalog = CatalogService(registry, fetcher)
        self.aggregator = Aggregator(registry, fetcher, max_concurrent_feeds)

    async def aclose(self) -> None:
        await self.fetcher.aclose()

    async def __aenter__(self) -> "JupiterChannel":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def get_channel_features(self) -> ChannelFeatures:
        """Capabilities advertised to the host."""
        return ChannelFeatures(
            content_types=[ContentType.PODCAST],
            media_types=[MediaType.AUDIO],
            max_page_size=MAX_PAGE_SIZE,
            default_sort_fields=[SortField.NAME, SortField.PREMIERE_DATE, SortField.RUNTIME],
            supports_content_downloading=True,
            supports_sort_order_toggle=True,
        )

    def get_supported_channel_images(self) -> list[ImageType]:
        return list(_CHANNEL_IMAGES)

    def get_channel_image(self, image_type: ImageType) -> ChannelImage:
        """Look up a channel-level image.

        Raises:
            UnsupportedImageTypeError: For image types the channel does not serve
        """
        try:
            image_format, filename = _CHANNEL_IMAGES[image_type]
        except KeyError:
            raise UnsupportedImageTypeError(image_type) from None

        return ChannelImage(
            image_type=image_type,
            format=image_format,
            url=f"{ARTWORK_BASE_URL}{filename}",
        )

    def is_enabled_for(self, user_id: str) -> bool:
        return True

    async def get_channel_items(self, query: ChannelQuery) -> CatalogPage:
        """Browse the channel: the show list or one show's episodes."""
        logger.debug("Channel items requested for folder: %s", query.folder_id)
        return await self.catalog.get_items(query)

    async def get_all_media(self, query: AllMediaQuery) -> CatalogPage:
        return await self.aggregator.get_all_media(query.content_types)

    async def get_latest_media(self, query: LatestMediaQuery) -> list[MediaItem]:
        return await self.aggregator.get_latest_media(query.user_id)


def build_channel(
    config: GlobalConfig | None = None,
    client: httpx.AsyncClient | None = None,
    registry: ShowRegistry | None = None,
) -> JupiterChannel:
    """Construct a channel from configuration.

    Args:
        config: Global configuration (defaults used when None)
        client: Optional HTTP client to share; the caller keeps ownership
        registry: Optional show registry (defaults to the built-in shows)

    Returns:
        JupiterChannel ready for use as an async context manager
    """
    config = config or GlobalConfig()
    fetcher = FeedFetcher(client=client, config=config.http)
    return JupiterChannel(
        registry=registry or ShowRegistry(),
        fetcher=fetcher,
        max_concurrent_feeds=config.aggregation.max_concurrent_feeds,
    )
