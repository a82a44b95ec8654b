"""Services Layer: entity repositories over the DocumentStore.

Invariants:
    - One repository per collection, each a load -> mutate -> save shell
      around the pure builders in core/records.py
    - Repositories never check ownership or input shape (routes do)
"""
