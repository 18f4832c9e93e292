"""Domain models for the resolution pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from trackbridge.models.enums import MetadataSource, ResourceKind

UNKNOWN_TRACK = "Unknown Track"
UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


class ResourceReference(BaseModel):
    """A YouTube video or playlist identified by its ID."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    kind: ResourceKind


class RawMetadata(BaseModel):
    """Unparsed metadata as returned by a metadata source.

    Attributes:
        title: Video or playlist title.
        channel_title: Channel (or oEmbed author) name.
        thumbnail_url: Thumbnail URL, empty if the source had none.
        source: Which source produced this metadata.
    """

    model_config = ConfigDict(frozen=True)

    title: str = UNKNOWN_TRACK
    channel_title: str = UNKNOWN_ARTIST
    thumbnail_url: str = ""
    source: MetadataSource


class ParsedTrackInfo(BaseModel):
    """Track and artist names split out of a raw title."""

    model_config = ConfigDict(frozen=True)

    track_name: str
    artist_name: str


class ResolvedTrack(BaseModel):
    """Final result of resolving a YouTube URL.

    Serializes with camelCase keys (``serviceUrl``, ``trackName``, ...).

    Attributes:
        service_url: Music service track URL built from a synthesized ID.
        track_name: Parsed track name.
        artist_name: Parsed artist name.
        album_name: Always "Unknown Album" (no album source exists).
        thumbnail_url: Thumbnail URL.
        original_title: Raw upstream title, None when nothing answered.
        source: Which tier produced the metadata.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    service_url: str
    track_name: str
    artist_name: str
    album_name: str = UNKNOWN_ALBUM
    thumbnail_url: str = ""
    original_title: str | None = None
    source: MetadataSource
