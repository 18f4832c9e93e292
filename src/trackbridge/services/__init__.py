"""Business logic services for trackbridge.

Public API:
    TrackResolverService - Resolve YouTube URLs into track metadata
"""

from trackbridge.services.resolver import TrackResolverService

__all__ = [
    "TrackResolverService",
]
