"""Test fixtures and configuration."""

from collections.abc import Callable

import pytest
from trackbridge.config import ResolverConfig
from trackbridge.models import (
    MetadataSource,
    RawMetadata,
    ResourceKind,
    ResourceReference,
)
from trackbridge.services import TrackResolverService


class StubPrimary:
    """Primary source stub recording every reference it is asked for."""

    def __init__(self, result: RawMetadata | None = None) -> None:
        self._result = result
        self.calls: list[ResourceReference] = []

    async def fetch(self, reference: ResourceReference) -> RawMetadata | None:
        self.calls.append(reference)
        return self._result


class StubFallback:
    """Fallback source stub recording every URL it is asked for."""

    def __init__(self, result: RawMetadata | None = None) -> None:
        self._result = result
        self.calls: list[str] = []

    async def fetch(self, url: str) -> RawMetadata | None:
        self.calls.append(url)
        return self._result


Resolver = tuple[TrackResolverService, StubPrimary, StubFallback]


@pytest.fixture
def video_reference() -> ResourceReference:
    """Create a sample video reference."""
    return ResourceReference(id="dQw4w9WgXcQ", kind=ResourceKind.VIDEO)


@pytest.fixture
def playlist_reference() -> ResourceReference:
    """Create a sample playlist reference."""
    return ResourceReference(id="PLtest123", kind=ResourceKind.PLAYLIST)


@pytest.fixture
def api_metadata() -> RawMetadata:
    """Metadata as returned by the Data API for an official video."""
    return RawMetadata(
        title="Artist - Song (Official Video)",
        channel_title="ArtistVEVO",
        thumbnail_url="https://i.ytimg.com/vi/abc123/mqdefault.jpg",
        source=MetadataSource.YOUTUBE_API,
    )


@pytest.fixture
def oembed_metadata() -> RawMetadata:
    """Metadata as returned by oEmbed."""
    return RawMetadata(
        title="Some Song",
        channel_title="Some Channel",
        thumbnail_url="https://i.ytimg.com/vi/abc123/hqdefault.jpg",
        source=MetadataSource.OEMBED,
    )


@pytest.fixture
def make_resolver() -> Callable[..., Resolver]:
    """Build a resolver wired to stub sources.

    Returns a factory taking the primary and fallback results and returning
    (service, primary stub, fallback stub).
    """

    def _make(
        primary: RawMetadata | None = None,
        fallback: RawMetadata | None = None,
        config: ResolverConfig | None = None,
    ) -> Resolver:
        primary_stub = StubPrimary(primary)
        fallback_stub = StubFallback(fallback)
        service = TrackResolverService(primary_stub, fallback_stub, config=config)
        return service, primary_stub, fallback_stub

    return _make
