# Routes package init
"""
Starred Restaurants API — API Routes Package
=============================================

Route Inventory:
    - starred_restaurants.py: GET/POST          /starred-restaurants
                              GET/PATCH/PUT/DELETE /starred-restaurants/{id}
    - restaurants.py:         GET  /restaurants, /restaurants/{id}
    - health.py:              GET  /health
    - dependencies.py:        Depends() providers for the per-app services

Routes stay THIN: extract path/body values, call the service, return the
result. Status codes for failures come from the exception handlers in main.py.
"""
