"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes validate input and ownership, then delegate to repositories

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
