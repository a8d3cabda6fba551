"""
Starred Restaurants API — Starred Restaurant Service
=====================================================

What:  Owns the in-memory list of starred restaurants and joins it against
       the restaurant catalog.
Why:   Keeps every rule about starring (existence check, no duplicates,
       join projection) out of the route handlers.
How:   One instance per application, built by the app factory and injected
       into routes. Each operation runs its whole scan/mutate sequence
       under one lock.
Who:   Called by the /starred-restaurants route handlers.

Operations:
    list_starred()      → [StarredRestaurantView]   (insertion order)
    get_starred(id)     → StarredRestaurantView     NotFoundError
    create_starred(...) → StarredRestaurant          ValidationError / NotFoundError / ConflictError
    delete_starred(id)  → None                       NotFoundError
    update_comment(...) → StarredRestaurant          ValidationError / NotFoundError

Consistency:
    The restaurant reference is only checked when a record is created. If a
    restaurant later disappears from the catalog, get_starred() answers 404
    for that record and list_starred() leaves it out of the result.
"""

import logging
import threading
import uuid
from typing import Iterable, List, Optional

from starred_api.exceptions import ConflictError, NotFoundError, ValidationError
from starred_api.schemas.restaurant import StarredRestaurant, StarredRestaurantView
from starred_api.services.catalog import RestaurantCatalog

logger = logging.getLogger(__name__)


SEED_STARRED = [
    {
        "id": "a7272cd9-26fb-44b5-8d53-9781f55175a1",
        "restaurantId": "869c848c-7a58-4ed6-ab88-72ee2e8e677c",
        "comment": "Best pho in NYC",
    },
    {
        "id": "8df59b21-2152-4f9b-9200-95c19aa88226",
        "restaurantId": "e8036613-4b72-46f6-ab5e-edd2fc7c4fe4",
        "comment": "Their lunch special is the best!",
    },
]


class StarredRestaurantService:
    """
    Business logic for starred restaurants.

    Thread Safety:
        Route handlers may run on the event loop or on FastAPI's threadpool.
        An RLock guards the list so that check-then-append (create) and
        find-then-remove (delete) cannot interleave. Nothing under the lock
        performs I/O.

    Records handed back to callers are copies; the only way to change the
    list is through the methods below.
    """

    def __init__(
        self,
        catalog: RestaurantCatalog,
        starred: Optional[Iterable[StarredRestaurant]] = None,
    ):
        self._catalog = catalog
        self._starred: List[StarredRestaurant] = [r.model_copy() for r in (starred or [])]
        self._lock = threading.RLock()

    @classmethod
    def from_seed(cls, catalog: RestaurantCatalog) -> "StarredRestaurantService":
        """Build the service with the two records the application starts with."""
        return cls(catalog, (StarredRestaurant(**entry) for entry in SEED_STARRED))

    def __len__(self) -> int:
        with self._lock:
            return len(self._starred)

    # ── Internal helpers (caller holds the lock) ──────────────────────────

    def _find(self, starred_id: str) -> Optional[StarredRestaurant]:
        for record in self._starred:
            if record.id == starred_id:
                return record
        return None

    def _find_by_restaurant(self, restaurant_id: str) -> Optional[StarredRestaurant]:
        for record in self._starred:
            if record.restaurant_id == restaurant_id:
                return record
        return None

    # ── Reads ─────────────────────────────────────────────────────────────

    def list_starred(self) -> List[StarredRestaurantView]:
        """
        Join every starred record with its catalog entry.

        Records whose restaurant is no longer in the catalog are skipped and
        logged; the rest keep their insertion order.
        """
        with self._lock:
            views = []
            for record in self._starred:
                restaurant = self._catalog.find_by_id(record.restaurant_id)
                if restaurant is None:
                    logger.warning(
                        "Skipping starred restaurant %s: restaurant %s not in catalog",
                        record.id,
                        record.restaurant_id,
                    )
                    continue
                views.append(
                    StarredRestaurantView(id=record.id, comment=record.comment, name=restaurant.name)
                )
            return views

    def get_starred(self, starred_id: str) -> StarredRestaurantView:
        """
        Return one starred record joined with its catalog entry.

        Raises:
            NotFoundError: Unknown starred id, or its restaurant is missing
                from the catalog.
        """
        with self._lock:
            record = self._find(starred_id)
            if record is None:
                raise NotFoundError(resource="starred restaurant", resource_id=starred_id)

            restaurant = self._catalog.find_by_id(record.restaurant_id)
            if restaurant is None:
                raise NotFoundError(
                    resource="restaurant",
                    resource_id=record.restaurant_id,
                    context={"starred_id": starred_id},
                )

            return StarredRestaurantView(id=record.id, comment=record.comment, name=restaurant.name)

    # ── Writes ────────────────────────────────────────────────────────────

    def create_starred(
        self,
        restaurant_id: Optional[str],
        comment: Optional[str] = None,
    ) -> StarredRestaurant:
        """
        Star a catalog restaurant.

        Workflow:
            1. restaurant_id must be present (ValidationError)
            2. it must exist in the catalog (NotFoundError)
            3. it must not be starred already (ConflictError)
            4. append a record with a fresh UUID4 id

        Returns:
            The stored record (not joined).
        """
        if not restaurant_id:
            raise ValidationError(message="restaurantId is required", field="restaurantId")

        if self._catalog.find_by_id(restaurant_id) is None:
            raise NotFoundError(resource="restaurant", resource_id=restaurant_id)

        with self._lock:
            existing = self._find_by_restaurant(restaurant_id)
            if existing is not None:
                raise ConflictError(restaurant_id=restaurant_id, existing_id=existing.id)

            record = StarredRestaurant(
                id=str(uuid.uuid4()),
                restaurant_id=restaurant_id,
                comment=comment or "",
            )
            self._starred.append(record)

        logger.info("Starred restaurant %s as %s", restaurant_id, record.id)
        return record.model_copy()

    def delete_starred(self, starred_id: str) -> None:
        """
        Remove a starred record; the others keep their order.

        Raises:
            NotFoundError: No record with this id.
        """
        with self._lock:
            for index, record in enumerate(self._starred):
                if record.id == starred_id:
                    del self._starred[index]
                    break
            else:
                raise NotFoundError(resource="starred restaurant", resource_id=starred_id)

        logger.info("Unstarred %s (restaurant %s)", starred_id, record.restaurant_id)

    def update_comment(self, starred_id: str, comment: Optional[str]) -> StarredRestaurant:
        """
        Replace the comment of a starred record in place.

        An empty string is a valid comment; only a missing one is rejected.

        Raises:
            ValidationError: comment is None.
            NotFoundError: No record with this id.
        """
        if comment is None:
            raise ValidationError(message="comment is required", field="comment")

        with self._lock:
            record = self._find(starred_id)
            if record is None:
                raise NotFoundError(resource="starred restaurant", resource_id=starred_id)
            record.comment = comment
            updated = record.model_copy()

        logger.info("Updated comment on starred restaurant %s", starred_id)
        return updated
