"""FastAPI dependency injection factories.

Usage in routes:
    from trackbridge.api.dependencies import ResolverDep

    @router.post("/convert")
    async def convert(body: ConvertRequest, resolver: ResolverDep) -> ...:
        ...
"""

from typing import Annotated

from fastapi import Depends, Request

from trackbridge.services import TrackResolverService

# -- Service dependencies (created in the app lifespan) --


def get_resolver(request: Request) -> TrackResolverService:
    """Get the resolver created at startup."""
    return request.app.state.resolver


ResolverDep = Annotated[TrackResolverService, Depends(get_resolver)]
