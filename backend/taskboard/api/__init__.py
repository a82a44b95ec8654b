"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - Ownership checks happen here, on records returned by the repositories
"""
