"""Conversion API endpoints."""

from fastapi import APIRouter, status

from trackbridge.api.dependencies import ResolverDep
from trackbridge.models import ResolvedTrack
from trackbridge.schemas.convert import ConvertRequest

router = APIRouter(prefix="/convert", tags=["convert"])


@router.post("", status_code=status.HTTP_200_OK)
async def convert(body: ConvertRequest, resolver: ResolverDep) -> ResolvedTrack:
    """Resolve a YouTube video or playlist URL into track metadata."""
    return await resolver.resolve(body.url)


@router.post("/video", status_code=status.HTTP_200_OK)
async def convert_video(body: ConvertRequest, resolver: ResolverDep) -> ResolvedTrack:
    """Resolve a YouTube URL by its ``v`` parameter only."""
    return await resolver.resolve_video_only(body.url)
