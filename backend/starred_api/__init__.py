"""
Starred Restaurants API — Application Package Initializer
=========================================================

What: Marks the `starred_api` directory as a Python package.
Why:  Enables module imports like `from starred_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Starred list + catalog join
    ├─────────────────────────────────────┤
    │          Schemas (API Contract)     │  ← Pydantic models
    └─────────────────────────────────────┘

    There is no persistence layer: the starred list and the restaurant
    catalog live in process memory and are rebuilt from seed data on start.
"""

__version__ = "1.0.0"
