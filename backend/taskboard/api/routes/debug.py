"""Debug Route: raw document dump for local troubleshooting.

Invariants:
    - Only registered when settings.enable_debug_routes is true
    - Returns password hashes as stored; never enable outside development
"""

from fastapi import APIRouter, Depends

from taskboard.core.repository_protocols import DocumentStore
from taskboard.infrastructure.storage import get_store

router = APIRouter(prefix="/api/v1/debug", tags=["debug"])


@router.get("/store")
def dump_store(store: DocumentStore = Depends(get_store)):
    return store.load()
