"""
Starred Restaurants API — Restaurant Catalog
=============================================

What:  Read-only lookup table of restaurants keyed by id.
Why:   Starred records only hold a restaurant id; the display name is joined
       in from here at response time.
How:   Entries are kept in a dict (id → Restaurant) built once at
       construction. Insertion order of the seed list is the list order.
Who:   Consulted by StarredRestaurantService on every join and served
       read-only by the /restaurants routes.
"""

import logging
from typing import Dict, Iterable, List, Optional

from starred_api.schemas.restaurant import Restaurant

logger = logging.getLogger(__name__)


SEED_RESTAURANTS: List[Dict[str, str]] = [
    {"id": "869c848c-7a58-4ed6-ab88-72ee2e8e677c", "name": "Pho Palace"},
    {"id": "e8036613-4b72-46f6-ab5e-edd2fc7c4fe4", "name": "Golden Lotus Dim Sum"},
    {"id": "3d2b1a6f-5e7c-4b9a-8f10-2c4e6a8b0d12", "name": "Taqueria El Sol"},
    {"id": "a1c3e5f7-9b2d-4f6a-8c0e-1b3d5f7a9c24", "name": "Bella Napoli Pizzeria"},
    {"id": "7f9e1d3c-5b7a-4e2f-9d1c-3a5b7c9e1f36", "name": "Seoul Garden BBQ"},
]


class RestaurantCatalog:
    """
    Immutable restaurant catalog.

    The catalog never changes after construction, so lookups need no
    locking.
    """

    def __init__(self, restaurants: Iterable[Restaurant]):
        self._restaurants: Dict[str, Restaurant] = {}
        for restaurant in restaurants:
            if restaurant.id in self._restaurants:
                raise ValueError(f"Duplicate restaurant id in catalog: {restaurant.id}")
            self._restaurants[restaurant.id] = restaurant

    @classmethod
    def from_seed(cls) -> "RestaurantCatalog":
        """Build the catalog the service starts with."""
        catalog = cls(Restaurant(**entry) for entry in SEED_RESTAURANTS)
        logger.info("Restaurant catalog loaded: %d entries", len(catalog))
        return catalog

    def find_by_id(self, restaurant_id: Optional[str]) -> Optional[Restaurant]:
        """Return the restaurant with this id, or None."""
        if restaurant_id is None:
            return None
        return self._restaurants.get(restaurant_id)

    def list(self) -> List[Restaurant]:
        return list(self._restaurants.values())

    def __len__(self) -> int:
        return len(self._restaurants)

    def __contains__(self, restaurant_id: object) -> bool:
        return restaurant_id in self._restaurants
