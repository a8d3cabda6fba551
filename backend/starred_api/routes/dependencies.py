"""
FastAPI dependencies that hand the per-application services to routes.

The app factory stores one RestaurantCatalog and one
StarredRestaurantService on `app.state`; handlers receive them via
`Depends(...)` instead of importing module-level singletons.
"""

from fastapi import Request

from starred_api.services.catalog import RestaurantCatalog
from starred_api.services.starred_service import StarredRestaurantService


def get_catalog(request: Request) -> RestaurantCatalog:
    return request.app.state.catalog


def get_starred_service(request: Request) -> StarredRestaurantService:
    return request.app.state.starred_service
