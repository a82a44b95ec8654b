"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire format is camelCase, matching the stored document

Design Decisions:
    - Separate from repositories: schemas are API contracts, records are storage
"""
