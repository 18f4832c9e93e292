"""Heuristic parsing of YouTube titles into track and artist names.

YouTube titles follow loose conventions such as ``Artist - Track (Official
Video)``. This module separates the artist from the track when the title
embeds one, strips decoration that is not part of the song name, and falls
back to the channel name for the artist.

Parsing is pure and total: any pair of strings yields a ParsedTrackInfo.
"""

import logging
import re

from trackbridge.models.domain import UNKNOWN_ARTIST, UNKNOWN_TRACK, ParsedTrackInfo

logger = logging.getLogger(__name__)

# Words marking a bracketed group or pipe segment as decoration
_NOISE_PATTERN = re.compile(
    r"\b(?:"
    r"official|video|audio|lyrics?|visuali[sz]er|m/?v|hd|hq|4k|"
    r"remaster(?:ed)?|explicit|clip|color coded|full album"
    r")\b",
    re.IGNORECASE,
)

# (...), [...] and {...} groups
_BRACKET_GROUP_PATTERN = re.compile(r"[\(\[\{](?P<content>[^\(\)\[\]\{\}]*)[\)\]\}]")

# Space left before a closing bracket after an inner group was removed
_SPACE_BEFORE_CLOSE_PATTERN = re.compile(r"\s+(?=[\)\]\}])")

# "Artist - Track" separators: hyphen, en dash, em dash surrounded by spaces
_SEPARATOR_PATTERN = re.compile(r"\s+[-–—]\s+")

_PIPE_PATTERN = re.compile(r"\s+\|\s+")

# Channel decorations: "ArtistVEVO", "Artist - Topic", "Artist Official"
_CHANNEL_SUFFIX_PATTERN = re.compile(
    r"(?:\s*-\s*topic|vevo|\s+official)$", re.IGNORECASE
)

_QUOTES = "\"“”"


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def _strip_noise_groups(title: str) -> str:
    """Remove bracketed groups whose content is decoration.

    ``(Official Video)`` and ``[Lyrics]`` are removed, ``(feat. X)`` and
    ``(Remix)`` are kept. Nested groups are handled inside out, so
    ``(Official Video [HD])`` goes away as a whole.
    """

    def _replace(match: re.Match[str]) -> str:
        if _NOISE_PATTERN.search(match.group("content")):
            return " "
        return match.group(0)

    # Each pass removes innermost groups; a removal shortens the string
    cleaned = _BRACKET_GROUP_PATTERN.sub(_replace, title)
    while cleaned != title:
        title = cleaned
        cleaned = _BRACKET_GROUP_PATTERN.sub(_replace, title)
    return _SPACE_BEFORE_CLOSE_PATTERN.sub("", _collapse_whitespace(cleaned))


def _strip_noise_segments(title: str) -> str:
    """Drop trailing ``| ...`` segments that are decoration."""
    parts = _PIPE_PATTERN.split(title)
    while len(parts) > 1 and _NOISE_PATTERN.search(parts[-1]):
        parts.pop()
    return " | ".join(parts)


def clean_title(title: str) -> str:
    """Strip decoration from a raw title.

    Args:
        title: Raw video title.

    Returns:
        Title with noise groups and noise pipe segments removed.
    """
    cleaned = _collapse_whitespace(title)
    cleaned = _strip_noise_groups(cleaned)
    cleaned = _strip_noise_segments(cleaned)
    return cleaned.strip()


def clean_channel(channel: str) -> str:
    """Strip channel decorations such as ``VEVO`` and `` - Topic``.

    Returns the collapsed original when stripping would leave nothing.
    """
    collapsed = _collapse_whitespace(channel)
    stripped = _CHANNEL_SUFFIX_PATTERN.sub("", collapsed).strip()
    return stripped or collapsed


def split_artist_track(title: str) -> tuple[str, str] | None:
    """Split ``Artist - Track`` on the first separator.

    Returns:
        (artist, track) tuple, or None if the title embeds no artist.
    """
    parts = _SEPARATOR_PATTERN.split(title, maxsplit=1)
    if len(parts) != 2:
        return None
    artist = parts[0].strip()
    track = parts[1].strip().strip(_QUOTES).strip()
    if not artist or not track:
        return None
    return artist, track


def parse_track_info(title: str, channel: str) -> ParsedTrackInfo:
    """Parse a raw title and channel name into track and artist names.

    Heuristics, in order:
    1. Strip decoration ("(Official Video)", "[Lyrics]", "| Official Audio").
    2. If the title embeds "Artist - Track", use both halves.
    3. Otherwise the title is the track and the cleaned channel the artist.
    4. Empty names become "Unknown Track" / "Unknown Artist".

    Args:
        title: Raw video title.
        channel: Raw channel or author name.

    Returns:
        ParsedTrackInfo with non-empty track and artist names.
    """
    cleaned = clean_title(title or "")

    if split := split_artist_track(cleaned):
        artist_name, track_name = split
    else:
        track_name = cleaned.strip(_QUOTES).strip()
        artist_name = clean_channel(channel or "")

    info = ParsedTrackInfo(
        track_name=track_name or UNKNOWN_TRACK,
        artist_name=artist_name or UNKNOWN_ARTIST,
    )
    logger.debug(
        "Parsed %r / %r -> track=%r artist=%r",
        title,
        channel,
        info.track_name,
        info.artist_name,
    )
    return info
