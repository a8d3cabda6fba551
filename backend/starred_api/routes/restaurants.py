"""
Starred Restaurants API — Restaurant Catalog Route Handlers
============================================================

What:  Read-only access to the restaurant catalog.
Why:   Clients need catalog ids to star a restaurant.
"""

from typing import List

from fastapi import APIRouter, Depends

from starred_api.config import settings
from starred_api.exceptions import NotFoundError
from starred_api.routes.dependencies import get_catalog
from starred_api.schemas.restaurant import ErrorResponse, Restaurant
from starred_api.services.catalog import RestaurantCatalog

router = APIRouter(prefix=settings.restaurants_prefix, tags=["Restaurants"])


@router.get("", response_model=List[Restaurant], summary="List all restaurants")
@router.get("/", response_model=List[Restaurant], include_in_schema=False)
async def list_restaurants(
    catalog: RestaurantCatalog = Depends(get_catalog),
) -> List[Restaurant]:
    return catalog.list()


@router.get(
    "/{restaurant_id}",
    response_model=Restaurant,
    responses={404: {"description": "Restaurant not found", "model": ErrorResponse}},
    summary="Get a restaurant by ID",
)
async def get_restaurant(
    restaurant_id: str,
    catalog: RestaurantCatalog = Depends(get_catalog),
) -> Restaurant:
    restaurant = catalog.find_by_id(restaurant_id)
    if restaurant is None:
        raise NotFoundError(resource="restaurant", resource_id=restaurant_id)
    return restaurant
