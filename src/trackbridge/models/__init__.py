"""Data models for trackbridge.

Public API:
    ResolvedTrack - Final resolution result
    ResourceReference - (id, kind) pair parsed from a URL
    RawMetadata - Unparsed title/channel/thumbnail from a source
    ParsedTrackInfo - Track/artist split out of a title
    ResourceKind, MetadataSource - Enumerations

Internal (not exported):
    youtube.py - Models for parsing upstream responses
"""

from trackbridge.models.domain import (
    ParsedTrackInfo,
    RawMetadata,
    ResolvedTrack,
    ResourceReference,
)
from trackbridge.models.enums import MetadataSource, ResourceKind

__all__ = [
    "MetadataSource",
    "ParsedTrackInfo",
    "RawMetadata",
    "ResolvedTrack",
    "ResourceKind",
    "ResourceReference",
]
