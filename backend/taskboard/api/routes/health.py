"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the document store is unreadable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from taskboard.core.repository_protocols import DocumentStore
from taskboard.infrastructure.storage import get_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "taskboard-api",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check(store: DocumentStore = Depends(get_store)):
    """Readiness probe: includes a full document load."""
    if not store.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
