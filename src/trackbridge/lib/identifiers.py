"""Deterministic music-service-style track identifiers.

No real mapping from a YouTube video to a music service track exists, so
a placeholder ID is derived from the track and artist text instead. The
ID has the shape of a Spotify track ID: 22 base62 characters.
"""

import hashlib
import logging

logger = logging.getLogger(__name__)

TRACK_ID_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
TRACK_ID_LENGTH = 22

DEFAULT_SERVICE_BASE_URL = "https://open.spotify.com"


def _normalize(text: str) -> str:
    return " ".join(text.split())


def generate_track_id(track_name: str, artist_name: str) -> str:
    """Derive a stable 22-character base62 ID from track and artist.

    Whitespace is collapsed before hashing, so " Song " / "Artist" and
    "Song" / "Artist" give the same ID. Case is kept: YouTube IDs are
    case-sensitive.

    Args:
        track_name: Track name (or a raw video ID on the degrade path).
        artist_name: Artist name.

    Returns:
        22-character string over ``[0-9A-Za-z]``.
    """
    key = f"{_normalize(track_name)}|{_normalize(artist_name)}"
    value = int.from_bytes(hashlib.sha256(key.encode("utf-8")).digest(), "big")

    base = len(TRACK_ID_ALPHABET)
    chars: list[str] = []
    for _ in range(TRACK_ID_LENGTH):
        value, remainder = divmod(value, base)
        chars.append(TRACK_ID_ALPHABET[remainder])
    return "".join(chars)


def build_service_url(
    track_id: str, base_url: str = DEFAULT_SERVICE_BASE_URL
) -> str:
    """Build ``{base_url}/track/{track_id}``."""
    return f"{base_url.rstrip('/')}/track/{track_id}"
