"""
Starred Restaurants API — Pydantic Request/Response Schemas
===========================================================

What:  Pydantic models defining the API contract.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies and serialize
       responses. Field names go over the wire in camelCase (`restaurantId`)
       through aliases; request bodies accept the snake_case name as well.

Design Decision:
    Request bodies declare every field Optional. Presence is checked by the
    service layer so a missing `restaurantId` or `comment` becomes a 400
    from our own handler instead of FastAPI's 422 field report.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Models — held in memory by the services
# ══════════════════════════════════════════════════════════════════════════


class Restaurant(BaseModel):
    """
    What:  One entry of the read-only restaurant catalog.
    Who:   Returned by GET /restaurants and GET /restaurants/{id}; joined
           into StarredRestaurantView for its display name.
    """
    id: str = Field(description="Restaurant identifier (UUID)")
    name: str = Field(description="Display name")

    model_config = {"frozen": True}


class StarredRestaurant(BaseModel):
    """
    What:  A starred restaurant record as stored in the starred list.
    Who:   Returned raw (not joined) by POST and by the comment update.

    Only `comment` is ever reassigned after construction.
    """
    id: str = Field(description="Starred record identifier (UUID)")
    restaurant_id: str = Field(
        alias="restaurantId",
        description="Identifier of the starred catalog restaurant",
    )
    comment: str = Field(default="", description="Free-text comment")

    model_config = {"populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class StarredRestaurantView(BaseModel):
    """
    What:  Starred record joined with its catalog entry.
    Who:   Returned by GET /starred-restaurants (as array items) and
           GET /starred-restaurants/{id}.

    `name` is read from the catalog on every request and never stored.
    """
    id: str = Field(description="Starred record identifier")
    comment: str = Field(description="Free-text comment")
    name: str = Field(description="Restaurant display name from the catalog")


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every exception handler.

    Example:
        {
            "error": "conflict",
            "message": "Restaurant with ID '869c...' is already starred",
            "details": {"restaurant_id": "869c...", "existing_id": "a727..."},
            "request_id": "1f3a9c0b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness report with the sizes of the two in-memory collections."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    restaurants: int = Field(description="Number of restaurants in the catalog")
    starred: int = Field(description="Number of starred restaurant records")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class StarredRestaurantCreate(BaseModel):
    """Body of POST /starred-restaurants."""
    restaurant_id: Optional[str] = Field(
        default=None,
        alias="restaurantId",
        description="Catalog restaurant to star (required)",
    )
    comment: Optional[str] = Field(
        default=None,
        description="Free-text comment; empty string when omitted",
    )

    model_config = {"populate_by_name": True}


class CommentUpdate(BaseModel):
    """Body of PATCH/PUT /starred-restaurants/{id}."""
    comment: Optional[str] = Field(default=None, description="Replacement comment (required)")
