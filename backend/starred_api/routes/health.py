"""
Starred Restaurants API — Health Check Route
=============================================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   There are no external dependencies to probe; the response reports the
       version, uptime and the sizes of the in-memory collections.
"""

import time

from fastapi import APIRouter, Depends

from starred_api import __version__
from starred_api.routes.dependencies import get_catalog, get_starred_service
from starred_api.schemas.restaurant import HealthResponse
from starred_api.services.catalog import RestaurantCatalog
from starred_api.services.starred_service import StarredRestaurantService

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    catalog: RestaurantCatalog = Depends(get_catalog),
    service: StarredRestaurantService = Depends(get_starred_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        restaurants=len(catalog),
        starred=len(service),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
