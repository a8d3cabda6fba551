"""
Starred Restaurants API — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the failure paths of the API.
Why:   Services raise these instead of building HTTP responses themselves;
       global handlers registered in main.py turn them into status codes.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by services; caught by the handlers in main.py.
When:  During request processing. Every one of these is terminal for the
       request and is never retried server-side.

Exception Hierarchy:
    StarredRestaurantsError (base)
    ├── ValidationError   → 400 Bad Request (required field missing)
    ├── NotFoundError     → 404 Not Found
    └── ConflictError     → 409 Conflict (restaurant already starred)
"""

from typing import Any, Dict, Optional


class StarredRestaurantsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info for logs and the `details` field
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(StarredRestaurantsError):
    """
    Raised when a request body lacks a field the operation needs.

    What:    Only presence is checked (e.g. `restaurantId` on create,
             `comment` on update). Type errors in the JSON body are left to
             FastAPI, which answers 422.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(StarredRestaurantsError):
    """
    Raised when a starred record or a catalog entry does not exist.

    When:    Unknown starred id on get/update/delete, unknown restaurant id
             on create, or a starred record whose restaurant has since left
             the catalog (get by id).
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(StarredRestaurantsError):
    """
    Raised when a restaurant is starred a second time.

    HTTP:    409 Conflict

    The existing record's id goes into the context so the client can find
    it without listing the whole collection.
    """

    def __init__(
        self,
        restaurant_id: str,
        existing_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Restaurant with ID '{restaurant_id}' is already starred"
        ctx = context or {}
        ctx["restaurant_id"] = restaurant_id
        if existing_id:
            ctx["existing_id"] = existing_id
        super().__init__(message=message, context=ctx)
        self.restaurant_id = restaurant_id
        self.existing_id = existing_id
