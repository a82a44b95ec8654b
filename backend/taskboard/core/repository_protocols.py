"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The whole document is the unit of IO: load() returns it, save() replaces it
    - Implementations raise StorageUnavailableError and nothing else

Design Decisions:
    - Protocol over ABC: JsonFileStore and SqlDocumentStore share no base class
    - Synchronous methods: every backend does local disk IO only
"""

from typing import Protocol


class DocumentStore(Protocol):
    """Contract for whole-document persistence, implemented by infrastructure/."""
    def load(self) -> dict: ...
    def save(self, document: dict) -> None: ...
    def health_check(self) -> bool: ...
