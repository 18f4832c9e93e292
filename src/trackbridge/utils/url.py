"""URL parsing utilities."""

import logging
import re
from urllib.parse import parse_qs, quote, unquote_plus, urlparse

from trackbridge.exceptions import InvalidUrlError
from trackbridge.models.domain import ResourceReference
from trackbridge.models.enums import ResourceKind

logger = logging.getLogger(__name__)

VIDEO_ID_PATTERN = re.compile(r"[?&]v=([^&#]+)")

# Recognized YouTube hostnames
_YOUTUBE_HOSTS = {
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
}

# Path -> (query parameter, resource kind)
_URL_SHAPES = {
    "/watch": ("v", ResourceKind.VIDEO),
    "/playlist": ("list", ResourceKind.PLAYLIST),
}

# Maximum URL length to prevent potential abuse (standard browser limit)
MAX_URL_LENGTH = 2048

THUMBNAIL_URL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


def parse_resource_reference(url: str) -> ResourceReference:
    """Classify a YouTube URL and extract the resource ID.

    Recognizes ``/watch?v=ID`` (video) and ``/playlist?list=ID`` (playlist)
    on YouTube and YouTube Music hosts.

    Args:
        url: Full YouTube or YouTube Music URL.

    Returns:
        The parsed ResourceReference.

    Raises:
        InvalidUrlError: If the URL matches neither shape.
    """
    if not url or len(url) > MAX_URL_LENGTH:
        raise InvalidUrlError(f"Invalid YouTube URL: {url[:100]}")

    try:
        parsed = urlparse(url.strip())
    except ValueError as e:
        raise InvalidUrlError(f"Invalid YouTube URL: {url}") from e

    host = (parsed.hostname or "").lower()
    if host not in _YOUTUBE_HOSTS:
        raise InvalidUrlError(f"Not a YouTube URL: {url}")

    shape = _URL_SHAPES.get(parsed.path)
    if shape is None:
        raise InvalidUrlError(f"Unsupported YouTube URL path: {url}")

    param, kind = shape
    values = parse_qs(parsed.query).get(param)
    if not values or not values[0].strip():
        raise InvalidUrlError(f"Missing '{param}' parameter in URL: {url}")

    reference = ResourceReference(id=values[0].strip(), kind=kind)
    logger.debug("Extracted %s ID: %s", kind.value, reference.id)
    return reference


def parse_video_id(url: str) -> str:
    """Extract the ``v`` query parameter from a URL.

    Looser than parse_resource_reference(): only the presence of a
    ``v=`` parameter is checked.

    Args:
        url: URL containing a ``v`` query parameter.

    Returns:
        The video ID string.

    Raises:
        InvalidUrlError: If no video ID can be found.
    """
    if not url or len(url) > MAX_URL_LENGTH:
        raise InvalidUrlError(f"Invalid YouTube URL: {url[:100]}")
    if match := VIDEO_ID_PATTERN.search(url):
        # Decoded the same way parse_qs decodes it for parse_resource_reference
        video_id = unquote_plus(match.group(1)).strip()
        if video_id:
            logger.debug("Extracted video ID: %s", video_id)
            return video_id
    raise InvalidUrlError(f"Could not extract video ID from: {url}")


def build_thumbnail_url(video_id: str) -> str:
    """Public thumbnail URL for a video ID."""
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)


def build_watch_url(video_id: str) -> str:
    """Canonical watch URL for a video ID."""
    return WATCH_URL_TEMPLATE.format(video_id=quote(video_id, safe=""))
