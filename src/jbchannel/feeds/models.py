"""Data models for raw feed documents."""

from pydantic import BaseModel, ConfigDict, Field


class RawFeedEntry(BaseModel):
    """One ``<item>`` of a feed, as published.

    Values are kept as raw strings; interpretation happens in the
    normalizer.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    enclosure_url: str = ""
    pub_date: str | None = None
    duration: str | None = None
    summary: str = ""


class FeedDocument(BaseModel):
    """A deserialized feed: channel title plus entries in document order."""

    title: str = ""
    entries: list[RawFeedEntry] = Field(default_factory=list)
