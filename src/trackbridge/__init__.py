"""trackbridge - Resolve YouTube URLs into normalized track metadata.

This library turns a YouTube video or playlist URL into a track record
(track name, artist name, thumbnail and a music-service-style link). It
asks the YouTube Data API first, falls back to the public oEmbed endpoint,
and degrades to a record built from the video ID when neither answers.

Examples:
    Resolve a video:
    ```python
    from trackbridge import ResolverConfig, create_resolver

    async with create_resolver(ResolverConfig(api_key="...")) as resolver:
        track = await resolver.resolve("https://www.youtube.com/watch?v=...")
        print(f"{track.artist_name} - {track.track_name}: {track.service_url}")
    ```
"""

import httpx

from trackbridge.client import OEmbedClient as _OEmbedClient
from trackbridge.client import YouTubeDataClient as _YouTubeDataClient
from trackbridge.config import ResolverConfig
from trackbridge.exceptions import (
    InvalidUrlError,
    TrackBridgeError,
    UpstreamUnavailableError,
)
from trackbridge.models import (
    MetadataSource,
    ParsedTrackInfo,
    RawMetadata,
    ResolvedTrack,
    ResourceKind,
    ResourceReference,
)
from trackbridge.services import TrackResolverService


def create_resolver(
    config: ResolverConfig | None = None,
    http: httpx.AsyncClient | None = None,
) -> TrackResolverService:
    """Create a configured track resolver.

    This is the recommended way to create a resolver for library usage.
    It wires both metadata clients to one HTTP client.

    Args:
        config: Optional resolver configuration. Uses defaults if not provided.
        http: Optional HTTP client. When omitted, one is created with the
            configured timeout and closed with the resolver.

    Returns:
        A configured TrackResolverService instance.

    Examples:
        With an API key:
        ```python
        resolver = create_resolver(ResolverConfig(api_key="..."))
        ```

        oEmbed only (no key):
        ```python
        resolver = create_resolver()
        ```
    """
    config = config or ResolverConfig()
    owned: httpx.AsyncClient | None = None
    if http is None:
        http = owned = httpx.AsyncClient(timeout=config.request_timeout)
    return TrackResolverService(
        primary=_YouTubeDataClient(http, config),
        fallback=_OEmbedClient(http, config),
        config=config,
        http=owned,
    )


__all__ = [
    "InvalidUrlError",
    "MetadataSource",
    "ParsedTrackInfo",
    "RawMetadata",
    "ResolvedTrack",
    "ResolverConfig",
    "ResourceKind",
    "ResourceReference",
    "TrackBridgeError",
    "TrackResolverService",
    "UpstreamUnavailableError",
    "create_resolver",
]
