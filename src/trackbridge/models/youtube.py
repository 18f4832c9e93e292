"""Models for parsing YouTube Data API and oEmbed responses.

These are internal models used to validate upstream payloads. Every field
is optional: missing data is defaulted later, never rejected here.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ListResponse",
    "OEmbedResponse",
    "ResourceItem",
    "Snippet",
    "Thumbnail",
    "Thumbnails",
]


class YouTubeModel(BaseModel):
    """Base model for upstream responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Thumbnail(YouTubeModel):
    """A single thumbnail rendition."""

    url: str | None = None
    width: int | None = None
    height: int | None = None


class Thumbnails(YouTubeModel):
    """Thumbnail renditions keyed by resolution name."""

    default: Thumbnail | None = None
    medium: Thumbnail | None = None
    high: Thumbnail | None = None

    @property
    def preferred_url(self) -> str:
        """Medium thumbnail, then default, then empty string."""
        for thumb in (self.medium, self.default):
            if thumb and thumb.url:
                return thumb.url
        return ""


class Snippet(YouTubeModel):
    """The ``snippet`` part of a video or playlist resource."""

    title: str | None = None
    channel_title: str | None = Field(default=None, alias="channelTitle")
    thumbnails: Thumbnails = Field(default_factory=Thumbnails)


class ResourceItem(YouTubeModel):
    """A video or playlist resource."""

    id: str | None = None
    snippet: Snippet | None = None


class ListResponse(YouTubeModel):
    """Response of ``videos.list`` / ``playlists.list``."""

    items: list[ResourceItem] = Field(default_factory=list)


class OEmbedResponse(YouTubeModel):
    """Response of the public oEmbed endpoint."""

    title: str | None = None
    author_name: str | None = None
    thumbnail_url: str | None = None
