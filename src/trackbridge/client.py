"""Metadata source clients: YouTube Data API and public oEmbed."""

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from trackbridge.config import ResolverConfig
from trackbridge.exceptions import UpstreamUnavailableError
from trackbridge.models.domain import (
    UNKNOWN_ARTIST,
    UNKNOWN_TRACK,
    RawMetadata,
    ResourceReference,
)
from trackbridge.models.enums import MetadataSource
from trackbridge.models.youtube import ListResponse, OEmbedResponse, ResourceItem

logger = logging.getLogger(__name__)


class PrimaryMetadataProtocol(Protocol):
    """Protocol for the structured metadata source.

    This protocol enables dependency injection and testing.
    """

    async def fetch(self, reference: ResourceReference) -> RawMetadata | None:
        """Fetch metadata for a resource, or None if unavailable."""
        ...


class FallbackMetadataProtocol(Protocol):
    """Protocol for the URL-keyed fallback metadata source."""

    async def fetch(self, url: str) -> RawMetadata | None:
        """Fetch metadata for a URL, or None if unavailable."""
        ...


async def _get_json(http: httpx.AsyncClient, url: str, params: dict[str, str]) -> Any:
    """GET a JSON document, mapping every failure to UpstreamUnavailableError."""
    try:
        response = await http.get(url, params=params)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        raise UpstreamUnavailableError(
            f"HTTP {e.response.status_code} from {url}"
        ) from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailableError(
            f"Request to {url} failed: {type(e).__name__}: {e}"
        ) from e
    except ValueError as e:
        raise UpstreamUnavailableError(f"Invalid JSON from {url}") from e


class YouTubeDataClient:
    """YouTube Data API v3 client.

    Looks up a video or playlist by ID, requesting only the ``snippet``
    part. Implements PrimaryMetadataProtocol: every failure is logged and
    reported as an empty result.
    """

    def __init__(
        self, http: httpx.AsyncClient, config: ResolverConfig | None = None
    ) -> None:
        """Initialize the client.

        Args:
            http: Shared async HTTP client.
            config: Optional resolver configuration. Uses defaults if not provided.
        """
        self._http = http
        self._config = config or ResolverConfig()

    async def fetch(self, reference: ResourceReference) -> RawMetadata | None:
        """Fetch title, channel and thumbnail for a resource.

        Args:
            reference: Video or playlist to look up.

        Returns:
            RawMetadata built from the first result item, or None if the API
            key is missing, the request failed or no item was returned.
        """
        if not self._config.api_key:
            logger.info("No YouTube API key configured, skipping Data API lookup")
            return None

        try:
            item = await self._get_first_item(reference)
        except UpstreamUnavailableError as e:
            logger.warning(
                "YouTube Data API lookup failed for %s %s: %s",
                reference.kind.value,
                reference.id,
                e,
            )
            return None

        snippet = item.snippet
        if snippet is None:
            return RawMetadata(source=MetadataSource.YOUTUBE_API)

        metadata = RawMetadata(
            title=snippet.title or UNKNOWN_TRACK,
            channel_title=snippet.channel_title or UNKNOWN_ARTIST,
            thumbnail_url=snippet.thumbnails.preferred_url,
            source=MetadataSource.YOUTUBE_API,
        )
        logger.debug(
            "Data API: title=%r channel=%r", metadata.title, metadata.channel_title
        )
        return metadata

    async def _get_first_item(self, reference: ResourceReference) -> ResourceItem:
        """Call ``{videos|playlists}.list`` and return the first item.

        Raises:
            UpstreamUnavailableError: On request failure or empty result.
        """
        url = f"{self._config.api_base_url.rstrip('/')}/{reference.kind.endpoint}"
        params = {
            "part": "snippet",
            "id": reference.id,
            "key": self._config.api_key or "",
        }
        logger.debug(
            "Fetching %s from Data API: %s", reference.kind.value, reference.id
        )
        data = await _get_json(self._http, url, params)

        try:
            response = ListResponse.model_validate(data)
        except ValidationError as e:
            raise UpstreamUnavailableError(f"Malformed Data API response: {e}") from e

        if not response.items:
            raise UpstreamUnavailableError("No items returned")
        return response.items[0]


class OEmbedClient:
    """Public oEmbed client.

    Unauthenticated, keyed by the original URL. Implements
    FallbackMetadataProtocol.
    """

    def __init__(
        self, http: httpx.AsyncClient, config: ResolverConfig | None = None
    ) -> None:
        """Initialize the client.

        Args:
            http: Shared async HTTP client.
            config: Optional resolver configuration. Uses defaults if not provided.
        """
        self._http = http
        self._config = config or ResolverConfig()

    async def fetch(self, url: str) -> RawMetadata | None:
        """Fetch title, author and thumbnail for a URL.

        Args:
            url: Original YouTube URL.

        Returns:
            RawMetadata built from the oEmbed document, or None on failure.
        """
        logger.debug("Fetching oEmbed metadata: %s", url)
        try:
            data = await _get_json(
                self._http, self._config.oembed_url, {"url": url, "format": "json"}
            )
            response = OEmbedResponse.model_validate(data)
        except UpstreamUnavailableError as e:
            logger.warning("oEmbed lookup failed for %s: %s", url, e)
            return None
        except ValidationError as e:
            logger.warning("Malformed oEmbed response for %s: %s", url, e)
            return None

        metadata = RawMetadata(
            title=response.title or UNKNOWN_TRACK,
            channel_title=response.author_name or UNKNOWN_ARTIST,
            thumbnail_url=response.thumbnail_url or "",
            source=MetadataSource.OEMBED,
        )
        logger.debug(
            "oEmbed: title=%r author=%r", metadata.title, metadata.channel_title
        )
        return metadata
