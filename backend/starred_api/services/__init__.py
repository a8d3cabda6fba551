# Services package init
"""
Starred Restaurants API — Services Layer
=========================================

What:  Business logic sitting between the routes (HTTP) and the in-memory data.

Service Inventory:
    - RestaurantCatalog: read-only restaurant lookup table
    - StarredRestaurantService: starred list with create/update/delete and
      the join against the catalog

Both are instantiated once by the app factory and reached by routes through
FastAPI dependencies (see routes/dependencies.py), so tests can build a
fresh application with fresh state.
"""
