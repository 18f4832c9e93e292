"""Enumerations for trackbridge domain models."""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Kind of YouTube resource a URL points at."""

    VIDEO = "video"
    PLAYLIST = "playlist"

    @property
    def endpoint(self) -> str:
        """YouTube Data API list endpoint serving this kind."""
        match self:
            case ResourceKind.VIDEO:
                return "videos"
            case ResourceKind.PLAYLIST:
                return "playlists"


class MetadataSource(StrEnum):
    """Where the metadata of a resolved track came from."""

    YOUTUBE_API = "youtube_api"
    OEMBED = "oembed"
    FALLBACK = "fallback"  # Fabricated from the resource ID alone
