#!/usr/bin/env python3
"""Command-line interface for trackbridge.

This CLI is primarily for debugging and development.
For production use, import trackbridge as a library or run the API.
"""

import asyncio
import dataclasses
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from trackbridge import create_resolver
from trackbridge.exceptions import TrackBridgeError
from trackbridge.lib.identifiers import build_service_url, generate_track_id
from trackbridge.lib.titles import parse_track_info
from trackbridge.models import ResolvedTrack
from trackbridge.settings import get_settings

logger = logging.getLogger("trackbridge")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    # Clear existing handlers to allow reconfiguration
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Request URLs carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def print_track(console: Console, track: ResolvedTrack) -> None:
    """Print a resolved track as a vertical card.

    Args:
        console: Rich console for output.
        track: Resolved track to display.
    """
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]Resolved via {track.source.value}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=12)
    table.add_column("Value", overflow="fold")

    table.add_row("Track", track.track_name)
    table.add_row("Artist", track.artist_name)
    table.add_row("Album", track.album_name)
    table.add_row("Link", track.service_url)
    if track.thumbnail_url:
        table.add_row("Thumbnail", track.thumbnail_url)
    if track.original_title:
        table.add_row("Title", track.original_title)

    console.print()
    console.print(table)


async def _resolve(url: str, video_only: bool, api_key: str | None) -> ResolvedTrack:
    config = get_settings().resolver_config()
    if api_key:
        config = dataclasses.replace(config, api_key=api_key)

    async with create_resolver(config) as resolver:
        if video_only:
            return await resolver.resolve_video_only(url)
        return await resolver.resolve(url)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Resolve YouTube URLs into music service track metadata."""
    setup_logging(verbose=verbose)


@main.command(name="resolve")
@click.argument("url", metavar="URL")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--video-only",
    is_flag=True,
    help="Only use the v= parameter of the URL (no playlist support).",
)
@click.option(
    "--api-key",
    envvar="TRACKBRIDGE_YOUTUBE_API_KEY",
    default=None,
    help="YouTube Data API key (without one only oEmbed is used).",
)
def resolve_cmd(url: str, as_json: bool, video_only: bool, api_key: str | None) -> None:
    """Resolve a YouTube video or playlist URL.

    \b
    Examples:
      trackbridge resolve "https://www.youtube.com/watch?v=VIDEO_ID"
      trackbridge resolve "https://www.youtube.com/playlist?list=PLxxx"
      trackbridge resolve --video-only "https://music.youtube.com/watch?v=VIDEO_ID"
    """
    console = Console()

    try:
        track = asyncio.run(_resolve(url, video_only, api_key))
    except TrackBridgeError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    if as_json:
        json.dump(
            track.model_dump(mode="json", by_alias=True),
            sys.stdout,
            indent=2,
            ensure_ascii=False,
        )
        sys.stdout.write("\n")
    else:
        print_track(console, track)


@main.command(name="parse")
@click.argument("title")
@click.argument("channel", default="")
def parse_cmd(title: str, channel: str) -> None:
    """Parse a raw TITLE and CHANNEL offline, without any network call.

    \b
    Examples:
      trackbridge parse "Artist - Song (Official Video)" "ArtistVEVO"
    """
    info = parse_track_info(title, channel)
    track_id = generate_track_id(info.track_name, info.artist_name)

    console = Console()
    table = Table(show_header=False, padding=(0, 1))
    table.add_column("Field", style="bold cyan", width=12)
    table.add_column("Value", overflow="fold")
    table.add_row("Track", info.track_name)
    table.add_row("Artist", info.artist_name)
    table.add_row(
        "Link", build_service_url(track_id, get_settings().service_base_url)
    )
    console.print(table)


if __name__ == "__main__":
    main()
