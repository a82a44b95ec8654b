"""Taskboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskboardError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Document store built once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - Debug dump route mounted only when settings.enable_debug_routes is set
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.routes import auth, boards, debug, health, tasks
from taskboard.config import get_settings
from taskboard.infrastructure.observability import setup_logging
from taskboard.infrastructure.storage import init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.uses_default_secret:
        logger.warning("JWT_SECRET not set; using the development default")
    init_store(settings)
    logger.info("Taskboard API started")
    yield
    logger.info("Taskboard API shutting down")


app = FastAPI(
    title="Taskboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    max_age=86400,
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(boards.router)
app.include_router(tasks.router)
if settings.enable_debug_routes:
    app.include_router(debug.router)

register_error_handlers(app)
