"""
Starred Restaurants API — Starred Restaurant Service Unit Tests
================================================================

What:  Tests for StarredRestaurantService (list, get, create, delete, update).
How:   Builds the service directly over a three-restaurant catalog; no HTTP.

What we test:
    ✅ Join projection and insertion order on list
    ✅ NotFound for unknown ids and for restaurants missing from the catalog
    ✅ Conflict on duplicate stars, with the list left unchanged
    ✅ Delete keeps the order of the remaining records
    ✅ Comment update changes nothing but the comment
    ✅ No duplicate restaurant ids under concurrent creates
"""

import threading
import uuid

import pytest

from starred_api.exceptions import ConflictError, NotFoundError, ValidationError
from starred_api.schemas.restaurant import StarredRestaurant
from starred_api.services.catalog import RestaurantCatalog
from starred_api.services.starred_service import SEED_STARRED, StarredRestaurantService


def _restaurant_ids(service):
    return [record.restaurant_id for record in service._starred]


class TestStarredServiceList:
    """Tests for list_starred()."""

    def test_list_empty(self, service):
        assert service.list_starred() == []

    def test_list_joins_names_in_insertion_order(self, service):
        first = service.create_starred("r2", "dumplings")
        second = service.create_starred("r1", "broth")

        views = service.list_starred()

        assert [v.id for v in views] == [first.id, second.id]
        assert [v.name for v in views] == ["Golden Lotus Dim Sum", "Pho Palace"]
        assert [v.comment for v in views] == ["dumplings", "broth"]

    def test_list_skips_records_missing_from_catalog(self, catalog):
        dangling = StarredRestaurant(id="s-gone", restaurant_id="closed-down", comment="")
        kept = StarredRestaurant(id="s-kept", restaurant_id="r3", comment="tacos")
        service = StarredRestaurantService(catalog, [dangling, kept])

        views = service.list_starred()

        assert [v.id for v in views] == ["s-kept"]
        assert len(service) == 2

    def test_from_seed_uses_seed_records(self):
        service = StarredRestaurantService.from_seed(RestaurantCatalog.from_seed())
        views = service.list_starred()
        assert [v.id for v in views] == [entry["id"] for entry in SEED_STARRED]
        assert views[0].comment == "Best pho in NYC"


class TestStarredServiceGet:
    """Tests for get_starred()."""

    def test_get_after_create_returns_catalog_name(self, service):
        created = service.create_starred("r1", "Great!")

        view = service.get_starred(created.id)

        assert view.id == created.id
        assert view.comment == "Great!"
        assert view.name == "Pho Palace"

    def test_get_unknown_id(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.get_starred("nonexistent-id")
        assert exc_info.value.resource == "starred restaurant"

    def test_get_with_restaurant_missing_from_catalog(self, catalog):
        record = StarredRestaurant(id="s1", restaurant_id="closed-down", comment="")
        service = StarredRestaurantService(catalog, [record])

        with pytest.raises(NotFoundError) as exc_info:
            service.get_starred("s1")
        assert exc_info.value.resource == "restaurant"


class TestStarredServiceCreate:
    """Tests for create_starred()."""

    def test_create_returns_raw_record(self, service):
        record = service.create_starred("r1", "Great!")

        assert record.restaurant_id == "r1"
        assert record.comment == "Great!"
        uuid.UUID(record.id)  # raises if not a UUID
        assert len(service) == 1

    def test_create_comment_defaults_to_empty(self, service):
        assert service.create_starred("r1").comment == ""
        assert service.create_starred("r2", None).comment == ""

    def test_create_generates_distinct_ids(self, service):
        ids = {service.create_starred(rid).id for rid in ("r1", "r2", "r3")}
        assert len(ids) == 3

    def test_create_unknown_restaurant(self, service):
        with pytest.raises(NotFoundError):
            service.create_starred("unknown-id")
        assert len(service) == 0

    @pytest.mark.parametrize("missing", [None, ""])
    def test_create_missing_restaurant_id(self, service, missing):
        with pytest.raises(ValidationError) as exc_info:
            service.create_starred(missing, "comment")
        assert exc_info.value.field == "restaurantId"
        assert len(service) == 0

    def test_create_duplicate_conflicts(self, service):
        original = service.create_starred("r1", "first")

        with pytest.raises(ConflictError) as exc_info:
            service.create_starred("r1", "second")

        assert exc_info.value.existing_id == original.id
        assert len(service) == 1
        assert service.get_starred(original.id).comment == "first"

    def test_restar_after_delete(self, service):
        first = service.create_starred("r1")
        service.delete_starred(first.id)

        second = service.create_starred("r1")

        assert second.id != first.id
        assert _restaurant_ids(service) == ["r1"]

    def test_returned_record_is_a_copy(self, service):
        record = service.create_starred("r1", "original")
        record.comment = "changed outside"
        assert service.get_starred(record.id).comment == "original"

    def test_concurrent_creates_never_duplicate(self, service):
        results = []
        barrier = threading.Barrier(8)

        def star():
            barrier.wait()
            try:
                results.append(service.create_starred("r1"))
            except ConflictError:
                results.append(None)

        threads = [threading.Thread(target=star) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len([r for r in results if r is not None]) == 1
        assert _restaurant_ids(service) == ["r1"]


class TestStarredServiceDelete:
    """Tests for delete_starred()."""

    def test_delete_preserves_order_of_rest(self, service):
        a = service.create_starred("r1")
        b = service.create_starred("r2")
        c = service.create_starred("r3")

        service.delete_starred(b.id)

        assert [v.id for v in service.list_starred()] == [a.id, c.id]

    def test_delete_unknown_leaves_list_unchanged(self, service):
        service.create_starred("r1")
        service.create_starred("r2")

        with pytest.raises(NotFoundError):
            service.delete_starred("nonexistent-id")

        assert _restaurant_ids(service) == ["r1", "r2"]

    def test_delete_twice(self, service):
        record = service.create_starred("r1")
        service.delete_starred(record.id)
        with pytest.raises(NotFoundError):
            service.delete_starred(record.id)


class TestStarredServiceUpdateComment:
    """Tests for update_comment()."""

    def test_update_changes_only_comment(self, service):
        a = service.create_starred("r1", "old")
        b = service.create_starred("r2", "other")

        updated = service.update_comment(a.id, "new")

        assert updated.id == a.id
        assert updated.restaurant_id == "r1"
        assert updated.comment == "new"
        views = service.list_starred()
        assert [v.id for v in views] == [a.id, b.id]
        assert [v.comment for v in views] == ["new", "other"]

    def test_update_to_empty_string(self, service):
        record = service.create_starred("r1", "something")
        assert service.update_comment(record.id, "").comment == ""

    def test_update_unknown_id(self, service):
        with pytest.raises(NotFoundError):
            service.update_comment("nonexistent-id", "hello")

    def test_update_missing_comment(self, service):
        record = service.create_starred("r1", "keep")
        with pytest.raises(ValidationError):
            service.update_comment(record.id, None)
        assert service.get_starred(record.id).comment == "keep"
