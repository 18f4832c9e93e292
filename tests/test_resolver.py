"""Tests for the track resolution service."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from trackbridge import create_resolver
from trackbridge.config import ResolverConfig
from trackbridge.exceptions import InvalidUrlError
from trackbridge.lib.identifiers import build_service_url, generate_track_id
from trackbridge.models import (
    MetadataSource,
    RawMetadata,
    ResolvedTrack,
    ResourceKind,
    ResourceReference,
)
from trackbridge.services import TrackResolverService

WATCH_URL = "https://www.youtube.com/watch?v=abc123"
PLAYLIST_URL = "https://www.youtube.com/playlist?list=PLtest123"

MakeResolver = Callable[..., tuple[TrackResolverService, Any, Any]]


class TestResolve:
    """Tests for TrackResolverService.resolve."""

    @pytest.mark.asyncio
    async def test_uses_primary_metadata(
        self, make_resolver: MakeResolver, api_metadata: RawMetadata
    ) -> None:
        """Primary result should be parsed and the fallback not called."""
        service, primary, fallback = make_resolver(primary=api_metadata)

        track = await service.resolve(WATCH_URL)

        assert track.track_name == "Song"
        assert track.artist_name == "Artist"
        assert track.album_name == "Unknown Album"
        assert track.thumbnail_url == api_metadata.thumbnail_url
        assert track.original_title == "Artist - Song (Official Video)"
        assert track.source == MetadataSource.YOUTUBE_API
        assert track.service_url == build_service_url(
            generate_track_id("Song", "Artist")
        )
        assert primary.calls == [
            ResourceReference(id="abc123", kind=ResourceKind.VIDEO)
        ]
        assert fallback.calls == []

    @pytest.mark.asyncio
    async def test_falls_back_to_oembed(
        self, make_resolver: MakeResolver, oembed_metadata: RawMetadata
    ) -> None:
        """Without a primary result the original URL goes to the fallback."""
        service, primary, fallback = make_resolver(fallback=oembed_metadata)

        track = await service.resolve(WATCH_URL)

        assert track.track_name == "Some Song"
        assert track.artist_name == "Some Channel"
        assert track.thumbnail_url == "https://i.ytimg.com/vi/abc123/hqdefault.jpg"
        assert track.source == MetadataSource.OEMBED
        assert track.service_url == build_service_url(
            generate_track_id("Some Song", "Some Channel")
        )
        assert len(primary.calls) == 1
        assert fallback.calls == [WATCH_URL]

    @pytest.mark.asyncio
    async def test_degrades_when_no_source_answers(
        self, make_resolver: MakeResolver
    ) -> None:
        """Both sources failing should still produce a record."""
        service, primary, fallback = make_resolver()

        track = await service.resolve(WATCH_URL)

        assert track == ResolvedTrack(
            service_url=build_service_url(generate_track_id("abc123", "YouTube")),
            track_name="Track abc123",
            artist_name="Unknown Artist",
            album_name="Unknown Album",
            thumbnail_url="https://img.youtube.com/vi/abc123/maxresdefault.jpg",
            original_title=None,
            source=MetadataSource.FALLBACK,
        )
        assert len(primary.calls) == 1
        assert len(fallback.calls) == 1

    @pytest.mark.asyncio
    async def test_degraded_result_is_stable(self, make_resolver: MakeResolver) -> None:
        """Degrading twice for the same video should give the same link."""
        service, _, _ = make_resolver()

        first = await service.resolve(WATCH_URL)
        second = await service.resolve(WATCH_URL)

        assert first == second

    @pytest.mark.asyncio
    async def test_passes_playlist_reference(
        self, make_resolver: MakeResolver, api_metadata: RawMetadata
    ) -> None:
        """Playlist URLs should reach the primary source as playlists."""
        service, primary, _ = make_resolver(primary=api_metadata)

        await service.resolve(PLAYLIST_URL)

        assert primary.calls == [
            ResourceReference(id="PLtest123", kind=ResourceKind.PLAYLIST)
        ]

    @pytest.mark.asyncio
    async def test_invalid_url_makes_no_calls(
        self, make_resolver: MakeResolver
    ) -> None:
        """Extraction failure should raise before any source is asked."""
        service, primary, fallback = make_resolver()

        with pytest.raises(InvalidUrlError):
            await service.resolve("https://example.com/foo")

        assert primary.calls == []
        assert fallback.calls == []

    @pytest.mark.asyncio
    async def test_uses_configured_service_base(
        self, make_resolver: MakeResolver, api_metadata: RawMetadata
    ) -> None:
        """Service links should use the configured base URL."""
        config = ResolverConfig(service_base_url="https://music.example.com")
        service, _, _ = make_resolver(primary=api_metadata, config=config)

        track = await service.resolve(WATCH_URL)

        assert track.service_url.startswith("https://music.example.com/track/")


class TestResolveVideoOnly:
    """Tests for TrackResolverService.resolve_video_only."""

    @pytest.mark.asyncio
    async def test_uses_v_parameter(
        self, make_resolver: MakeResolver, api_metadata: RawMetadata
    ) -> None:
        """The v parameter should be used even on a watch URL with a list."""
        service, primary, _ = make_resolver(primary=api_metadata)

        track = await service.resolve_video_only(
            "https://music.youtube.com/watch?list=PLtest123&v=abc123"
        )

        assert track.track_name == "Song"
        assert primary.calls == [
            ResourceReference(id="abc123", kind=ResourceKind.VIDEO)
        ]

    @pytest.mark.asyncio
    async def test_sends_canonical_watch_url_to_fallback(
        self, make_resolver: MakeResolver, oembed_metadata: RawMetadata
    ) -> None:
        """The fallback should get the watch URL of the ID, not the raw input."""
        service, _, fallback = make_resolver(fallback=oembed_metadata)

        track = await service.resolve_video_only(
            "https://music.youtube.com/watch?list=PLtest123&v=abc123&si=x"
        )

        assert track.source == MetadataSource.OEMBED
        assert fallback.calls == ["https://www.youtube.com/watch?v=abc123"]

    @pytest.mark.asyncio
    async def test_shares_degrade_with_resolve(
        self, make_resolver: MakeResolver
    ) -> None:
        """Both entry points should degrade to the same record."""
        service, _, fallback = make_resolver()

        full = await service.resolve(WATCH_URL)
        video_only = await service.resolve_video_only(WATCH_URL)

        assert full == video_only
        assert fallback.calls == [WATCH_URL, WATCH_URL]

    @pytest.mark.asyncio
    async def test_rejects_playlist_url(self, make_resolver: MakeResolver) -> None:
        """Playlist URLs carry no video ID."""
        service, primary, fallback = make_resolver()

        with pytest.raises(InvalidUrlError):
            await service.resolve_video_only(PLAYLIST_URL)

        assert primary.calls == []
        assert fallback.calls == []


class TestCreateResolver:
    """Tests for the create_resolver factory."""

    @pytest.mark.asyncio
    async def test_end_to_end_with_oembed(self) -> None:
        """Without an API key only oEmbed should be queried."""
        hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(
                200,
                json={
                    "title": "Artist - Song [Official Audio]",
                    "author_name": "Artist - Topic",
                    "thumbnail_url": "https://i.ytimg.com/vi/abc123/hqdefault.jpg",
                },
            )

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            resolver = create_resolver(http=http)
            track = await resolver.resolve(WATCH_URL)

        assert hosts == ["www.youtube.com"]
        assert track.track_name == "Song"
        assert track.artist_name == "Artist"
        assert track.source == MetadataSource.OEMBED

    @pytest.mark.asyncio
    async def test_closes_owned_client(self) -> None:
        """The resolver should close the HTTP client it created."""
        async with create_resolver() as resolver:
            http = resolver._http
            assert http is not None

        assert http.is_closed

    @pytest.mark.asyncio
    async def test_leaves_injected_client_open(self) -> None:
        """A caller-supplied HTTP client stays open."""
        async with httpx.AsyncClient() as http:
            async with create_resolver(http=http):
                pass
            assert not http.is_closed
