"""Utility functions for trackbridge.

Available via `from trackbridge.utils import ...` for power users.
Not re-exported at the top-level `trackbridge` package.
"""

from trackbridge.utils.url import (
    build_thumbnail_url,
    build_watch_url,
    parse_resource_reference,
    parse_video_id,
)

__all__ = [
    "build_thumbnail_url",
    "build_watch_url",
    "parse_resource_reference",
    "parse_video_id",
]
