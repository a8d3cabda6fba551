"""
Starred Restaurants API — Starred Restaurant Route Handlers
============================================================

What:  CRUD endpoints over the starred restaurant list.
How:   Extracts path/body values, delegates to StarredRestaurantService,
       returns JSON. Failures are raised by the service and turned into
       status codes by the handlers in main.py.

Endpoints (relative to settings.starred_prefix):
    GET    /        → 200 [StarredRestaurantView]
    GET    /{id}    → 200 StarredRestaurantView | 404
    POST   /        → 201 StarredRestaurant | 400 | 404 | 409
    DELETE /{id}    → 200 empty | 404
    PATCH  /{id}    → 200 StarredRestaurant | 400 | 404   (PUT behaves the same)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from starred_api.config import settings
from starred_api.routes.dependencies import get_starred_service
from starred_api.schemas.restaurant import (
    CommentUpdate,
    ErrorResponse,
    StarredRestaurant,
    StarredRestaurantCreate,
    StarredRestaurantView,
)
from starred_api.services.starred_service import StarredRestaurantService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.starred_prefix, tags=["Starred Restaurants"])


@router.get(
    "",
    response_model=List[StarredRestaurantView],
    summary="List starred restaurants",
    description=(
        "Returns every starred restaurant joined with its catalog entry, "
        "in the order they were starred."
    ),
)
@router.get("/", response_model=List[StarredRestaurantView], include_in_schema=False)
async def list_starred_restaurants(
    service: StarredRestaurantService = Depends(get_starred_service),
) -> List[StarredRestaurantView]:
    return service.list_starred()


@router.get(
    "/{starred_id}",
    response_model=StarredRestaurantView,
    responses={
        404: {"description": "Starred restaurant or its restaurant not found", "model": ErrorResponse},
    },
    summary="Get a starred restaurant by ID",
)
async def get_starred_restaurant(
    starred_id: str,
    service: StarredRestaurantService = Depends(get_starred_service),
) -> StarredRestaurantView:
    """
    Return one starred restaurant with the restaurant's current name.

    A record whose restaurant has been removed from the catalog answers 404
    as well; the two cases are told apart by the `message` in the body.
    """
    return service.get_starred(starred_id)


@router.post(
    "",
    status_code=201,
    response_model=StarredRestaurant,
    responses={
        400: {"description": "restaurantId missing", "model": ErrorResponse},
        404: {"description": "Restaurant not in catalog", "model": ErrorResponse},
        409: {"description": "Restaurant already starred", "model": ErrorResponse},
    },
    summary="Star a restaurant",
)
@router.post("/", status_code=201, response_model=StarredRestaurant, include_in_schema=False)
async def create_starred_restaurant(
    payload: Optional[StarredRestaurantCreate] = None,
    service: StarredRestaurantService = Depends(get_starred_service),
) -> StarredRestaurant:
    """
    Add a restaurant to the starred list.

    The body is optional at the HTTP level so that an empty request gets the
    same 400 as a body without `restaurantId`.
    """
    payload = payload or StarredRestaurantCreate()
    return service.create_starred(payload.restaurant_id, payload.comment)


@router.delete(
    "/{starred_id}",
    response_class=Response,
    responses={
        200: {"description": "Starred restaurant removed (empty body)"},
        404: {"description": "Starred restaurant not found", "model": ErrorResponse},
    },
    summary="Unstar a restaurant",
)
async def delete_starred_restaurant(
    starred_id: str,
    service: StarredRestaurantService = Depends(get_starred_service),
) -> Response:
    service.delete_starred(starred_id)
    return Response(status_code=200)


@router.patch(
    "/{starred_id}",
    response_model=StarredRestaurant,
    responses={
        400: {"description": "comment missing", "model": ErrorResponse},
        404: {"description": "Starred restaurant not found", "model": ErrorResponse},
    },
    summary="Update the comment of a starred restaurant",
)
@router.put(
    "/{starred_id}",
    response_model=StarredRestaurant,
    responses={
        400: {"description": "comment missing", "model": ErrorResponse},
        404: {"description": "Starred restaurant not found", "model": ErrorResponse},
    },
    summary="Replace the comment of a starred restaurant",
)
async def update_starred_comment(
    starred_id: str,
    payload: Optional[CommentUpdate] = None,
    service: StarredRestaurantService = Depends(get_starred_service),
) -> StarredRestaurant:
    payload = payload or CommentUpdate()
    return service.update_comment(starred_id, payload.comment)
