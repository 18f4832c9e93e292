"""Track resolution service."""

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Self

import httpx

from trackbridge.client import FallbackMetadataProtocol, PrimaryMetadataProtocol
from trackbridge.config import ResolverConfig
from trackbridge.lib.identifiers import build_service_url, generate_track_id
from trackbridge.lib.titles import parse_track_info
from trackbridge.models.domain import (
    UNKNOWN_ARTIST,
    RawMetadata,
    ResolvedTrack,
    ResourceReference,
)
from trackbridge.models.enums import MetadataSource, ResourceKind
from trackbridge.utils.url import (
    build_thumbnail_url,
    build_watch_url,
    parse_resource_reference,
    parse_video_id,
)

logger = logging.getLogger(__name__)

# Artist used to derive the ID when no metadata source answered
DEGRADE_ID_ARTIST = "YouTube"

# Maps the input URL to the reference and the URL handed to the fallback source
ReferenceParser = Callable[[str], tuple[ResourceReference, str]]


def _full_reference(url: str) -> tuple[ResourceReference, str]:
    return parse_resource_reference(url), url


def _video_reference(url: str) -> tuple[ResourceReference, str]:
    video_id = parse_video_id(url)
    reference = ResourceReference(id=video_id, kind=ResourceKind.VIDEO)
    return reference, build_watch_url(video_id)


class TrackResolverService:
    """Resolve YouTube URLs into ResolvedTrack records.

    Pipeline Overview:
    ==================
    1. Parse the URL into a ResourceReference (only step that can fail)
    2. Primary source: YouTube Data API by ID and kind
    3. Fallback source: oEmbed by URL, only if step 2 had no result. The
       full resolver sends the original URL, the video-only resolver the
       canonical watch URL of the extracted ID
    4. Degrade: fabricate a record from the ID alone if both had no result

    Metadata from steps 2 or 3 goes through the title parser and the ID
    synthesizer. Each step runs at most once per call; nothing is retried.
    """

    def __init__(
        self,
        primary: PrimaryMetadataProtocol,
        fallback: FallbackMetadataProtocol,
        config: ResolverConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            primary: Structured metadata source keyed by resource reference.
            fallback: Metadata source keyed by the original URL.
            config: Optional resolver configuration. Uses defaults if not provided.
            http: HTTP client owned by this service, closed by aclose().
        """
        self._primary = primary
        self._fallback = fallback
        self._config = config or ResolverConfig()
        self._http = http

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the owned HTTP client, if any."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    # ============================================================================
    # PUBLIC API
    # ============================================================================

    async def resolve(self, url: str) -> ResolvedTrack:
        """Resolve a video or playlist URL.

        Args:
            url: ``/watch?v=...`` or ``/playlist?list=...`` YouTube URL.

        Returns:
            The resolved track. Always returned for a valid URL.

        Raises:
            InvalidUrlError: If the URL is neither a watch nor a playlist URL.
        """
        logger.info("Resolving %s", url)
        return await self._run(url, _full_reference)

    async def resolve_video_only(self, url: str) -> ResolvedTrack:
        """Resolve a URL by its ``v`` query parameter only.

        Args:
            url: URL with a ``v=`` video ID parameter.

        Returns:
            The resolved track. Always returned when a video ID is present.

        Raises:
            InvalidUrlError: If the URL has no ``v`` parameter.
        """
        logger.info("Resolving video %s", url)
        return await self._run(url, _video_reference)

    # ============================================================================
    # PIPELINE
    # ============================================================================

    async def _run(self, url: str, parse_reference: ReferenceParser) -> ResolvedTrack:
        """Shared pipeline, parameterized by how the reference is obtained."""
        reference, fallback_url = parse_reference(url)

        metadata = await self._primary.fetch(reference)
        if metadata is None:
            logger.info("No Data API result for %s, trying oEmbed", reference.id)
            metadata = await self._fallback.fetch(fallback_url)

        if metadata is None:
            logger.warning(
                "No metadata source answered for %s, degrading", reference.id
            )
            return self._degrade(reference)

        return self._build(metadata)

    def _build(self, metadata: RawMetadata) -> ResolvedTrack:
        """Parse raw metadata and attach a synthesized service URL."""
        info = parse_track_info(metadata.title, metadata.channel_title)
        track_id = generate_track_id(info.track_name, info.artist_name)
        logger.info(
            "Resolved via %s: %s - %s",
            metadata.source.value,
            info.artist_name,
            info.track_name,
        )
        return ResolvedTrack(
            service_url=build_service_url(track_id, self._config.service_base_url),
            track_name=info.track_name,
            artist_name=info.artist_name,
            thumbnail_url=metadata.thumbnail_url,
            original_title=metadata.title,
            source=metadata.source,
        )

    def _degrade(self, reference: ResourceReference) -> ResolvedTrack:
        """Fabricate a record from the resource ID alone."""
        track_id = generate_track_id(reference.id, DEGRADE_ID_ARTIST)
        logger.debug("Fallback ID for %s: %s", reference.id, track_id)
        return ResolvedTrack(
            service_url=build_service_url(track_id, self._config.service_base_url),
            track_name=f"Track {reference.id}",
            artist_name=UNKNOWN_ARTIST,
            thumbnail_url=build_thumbnail_url(reference.id),
            source=MetadataSource.FALLBACK,
        )
