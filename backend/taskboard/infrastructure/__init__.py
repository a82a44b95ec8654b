"""Infrastructure Layer: storage backends, credentials and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every backend failure is mapped to StorageUnavailableError (core/errors.py)
"""
