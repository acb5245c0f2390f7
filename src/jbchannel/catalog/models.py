"""Data models for the channel catalog."""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jbchannel.feeds.duration import from_ticks


class ContentType(str, Enum):
    """Kind of content a channel item represents."""

    PODCAST = "podcast"
    CLIP = "clip"
    MOVIE = "movie"
    EPISODE = "episode"
    TRAILER = "trailer"


class MediaType(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"
    PHOTO = "photo"


class AudioCodec(str, Enum):
    MP3 = "mp3"


class ItemType(str, Enum):
    FOLDER = "folder"
    MEDIA = "media"


class ImageType(str, Enum):
    THUMB = "thumb"
    PRIMARY = "primary"
    BACKDROP = "backdrop"
    LOGO = "logo"
    BANNER = "banner"


class ImageFormat(str, Enum):
    PNG = "png"
    JPG = "jpg"


class ParentalRating(str, Enum):
    GENERAL_AUDIENCE = "general_audience"
    ADULT = "adult"


class SortField(str, Enum):
    NAME = "name"
    PREMIERE_DATE = "premiere_date"
    RUNTIME = "runtime"
    DATE_CREATED = "date_created"


class Show(BaseModel):
    """One podcast series in the registry."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    feed_url: str | None = None  # None when the show has no known feed
    artwork_url: str


class FolderItem(BaseModel):
    """A show rendered as a browsable folder."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image_url: str
    type: ItemType = ItemType.FOLDER


class MediaItem(BaseModel):
    """One playable episode.

    ``id`` is the enclosure URL. ``date_created`` and ``premiere_date``
    always carry the same value, both taken from the feed's publish date.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    show_id: str
    source_url: str
    overview: str = ""
    image_url: str = ""
    runtime_ticks: int | None = None
    date_created: datetime | None = None
    premiere_date: datetime | None = None
    content_type: ContentType = ContentType.PODCAST
    media_type: MediaType = MediaType.AUDIO
    audio_codec: AudioCodec = AudioCodec.MP3
    protocol: str = "http"
    is_infinite_stream: bool = True
    type: ItemType = ItemType.MEDIA

    @property
    def runtime(self) -> timedelta | None:
        """Runtime as a timedelta, if known."""
        if self.runtime_ticks is None:
            return None
        return from_ticks(self.runtime_ticks)

    @property
    def runtime_seconds(self) -> int | None:
        """Runtime in whole seconds, if known."""
        runtime = self.runtime
        if runtime is None:
            return None
        return int(runtime.total_seconds())


class CatalogPage(BaseModel):
    """One page of catalog results."""

    items: list[FolderItem | MediaItem] = Field(default_factory=list)
    total_count: int = 0


class ChannelQuery(BaseModel):
    """Browse request from the host.

    ``folder_id`` of None lists the shows, otherwise a show's episodes.
    """

    folder_id: str | None = None
    start_index: int | None = None
    user_id: str | None = None


class AllMediaQuery(BaseModel):
    """Request for every item across all shows."""

    content_types: list[ContentType] = Field(default_factory=list)
    user_id: str | None = None


class LatestMediaQuery(BaseModel):
    """Request for the latest items across all shows."""

    user_id: str | None = None


class ChannelImage(BaseModel):
    """Location and format of a channel-level image."""

    model_config = ConfigDict(frozen=True)

    image_type: ImageType
    format: ImageFormat
    url: str
    has_image: bool = True


class ChannelFeatures(BaseModel):
    """Capabilities advertised to the host."""

    content_types: list[ContentType]
    media_types: list[MediaType]
    max_page_size: int
    default_sort_fields: list[SortField]
    supports_content_downloading: bool = False
    supports_sort_order_toggle: bool = False
