"""
Starred Restaurants API — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the test suite.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── restaurants: A small catalog of three restaurants
    ├── catalog: RestaurantCatalog over `restaurants`
    ├── service: StarredRestaurantService with no starred records
    ├── app: Application built by create_app() with seed data
    └── test_client: HTTPX AsyncClient talking to `app` over ASGI
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set before any starred_api import so Settings picks it up
os.environ["LOG_LEVEL"] = "WARNING"

from starred_api.main import create_app  # noqa: E402
from starred_api.schemas.restaurant import Restaurant  # noqa: E402
from starred_api.services.catalog import RestaurantCatalog  # noqa: E402
from starred_api.services.starred_service import StarredRestaurantService  # noqa: E402


@pytest.fixture
def restaurants():
    return [
        Restaurant(id="r1", name="Pho Palace"),
        Restaurant(id="r2", name="Golden Lotus Dim Sum"),
        Restaurant(id="r3", name="Taqueria El Sol"),
    ]


@pytest.fixture
def catalog(restaurants):
    return RestaurantCatalog(restaurants)


@pytest.fixture
def service(catalog):
    """A starred restaurant service with an empty starred list."""
    return StarredRestaurantService(catalog)


@pytest.fixture
def app():
    """A fresh application with the seed catalog and the two seed stars."""
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into `app` through ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/starred-restaurants")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
