"""Tests for the host-facing channel."""

import pytest

from jbchannel.catalog.channel import JupiterChannel, build_channel
from jbchannel.catalog.models import (
    AllMediaQuery,
    ChannelQuery,
    ContentType,
    ImageFormat,
    ImageType,
    LatestMediaQuery,
    MediaType,
    ParentalRating,
    SortField,
)
from jbchannel.config.schema import AggregationConfig, GlobalConfig, HttpConfig
from jbchannel.utils.errors import UnsupportedImageTypeError

BSD_FEED = "http://feeds.feedburner.com/BsdNowMp3"


class TestChannelMetadata:
    """Tests for static channel information."""

    def test_identity(self) -> None:
        channel = build_channel()

        assert channel.name == "Jupiter Broadcasting"
        assert channel.description == ""
        assert channel.data_version == "2"
        assert channel.home_page_url == "http://www.jupiterbroadcasting.com"
        assert channel.parental_rating == ParentalRating.GENERAL_AUDIENCE

    def test_features(self) -> None:
        features = build_channel().get_channel_features()

        assert features.content_types == [ContentType.PODCAST]
        assert features.media_types == [MediaType.AUDIO]
        assert features.max_page_size == 100
        assert features.default_sort_fields == [
            SortField.NAME,
            SortField.PREMIERE_DATE,
            SortField.RUNTIME,
        ]
        assert features.supports_content_downloading
        assert features.supports_sort_order_toggle

    def test_enabled_for_everyone(self) -> None:
        assert build_channel().is_enabled_for("any-user") is True


class TestChannelImages:
    """Tests for channel image lookup."""

    def test_supported_images(self) -> None:
        assert build_channel().get_supported_channel_images() == [
            ImageType.THUMB,
            ImageType.PRIMARY,
            ImageType.BACKDROP,
        ]

    @pytest.mark.parametrize(
        ("image_type", "image_format", "filename"),
        [
            (ImageType.THUMB, ImageFormat.PNG, "thumb.png"),
            (ImageType.PRIMARY, ImageFormat.PNG, "jupiterbroadcasting.png"),
            (ImageType.BACKDROP, ImageFormat.JPG, "jupiterbackdrop.jpg"),
        ],
    )
    def test_supported_image(
        self, image_type: ImageType, image_format: ImageFormat, filename: str
    ) -> None:
        image = build_channel().get_channel_image(image_type)

        assert image.format == image_format
        assert image.url.endswith(filename)
        assert image.has_image

    def test_unsupported_image_raises(self) -> None:
        with pytest.raises(UnsupportedImageTypeError, match="Unsupported image type"):
            build_channel().get_channel_image(ImageType.BANNER)


class TestBuildChannel:
    """Tests for channel construction."""

    def test_config_applied(self) -> None:
        config = GlobalConfig(
            http=HttpConfig(timeout_seconds=3.0),
            aggregation=AggregationConfig(max_concurrent_feeds=2),
        )

        channel = build_channel(config)

        assert isinstance(channel, JupiterChannel)
        assert channel.fetcher.config.timeout_seconds == 3.0
        assert channel.aggregator.max_concurrent_feeds == 2

    def test_instances_are_independent(self) -> None:
        assert build_channel() is not build_channel()


class TestChannelDelegation:
    """Tests for catalog and aggregation entry points."""

    @pytest.mark.asyncio
    async def test_browse_root_and_folder(self, make_client, make_rss, sample_items) -> None:
        client = make_client({BSD_FEED: make_rss(sample_items)})

        async with build_channel(client=client) as channel:
            root = await channel.get_channel_items(ChannelQuery())
            episodes = await channel.get_channel_items(ChannelQuery(folder_id="bsd"))

        assert root.total_count == 11
        assert episodes.total_count == 3
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_latest_and_all_media(self, make_client, make_rss, sample_items) -> None:
        client = make_client({BSD_FEED: make_rss(sample_items)})

        async with build_channel(client=client) as channel:
            all_media = await channel.get_all_media(AllMediaQuery())
            filtered = await channel.get_all_media(
                AllMediaQuery(content_types=[ContentType.TRAILER])
            )
            latest = await channel.get_latest_media(LatestMediaQuery(user_id="u"))

        assert all_media.total_count == 3
        assert filtered.total_count == 0
        assert [item.name for item in latest] == ["Episode 3", "Episode 2", "Episode 1"]
        await client.aclose()
