# Middleware package init
"""
Starred Restaurants API — Middleware Package
=============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line and any error body carry
    the correlation id. Logging sees the final status code on the way out.
"""
