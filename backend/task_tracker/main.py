"""Task Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskTrackerError to {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_tracker import __version__
from task_tracker.api.error_handlers import register_error_handlers
from task_tracker.api.middleware import register_middleware
from task_tracker.api.routes import debug, health, tasks
from task_tracker.config import get_settings
from task_tracker.infrastructure.database import init_db
from task_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info("Task Tracker API started")
    yield
    await manager.close()
    logger.info("Task Tracker API shutting down")


app = FastAPI(
    title="Task Tracker API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=[
        "Origin", "X-Requested-With", "Content-Type", "Accept",
        "Authorization", "Cache-Control",
    ],
)
register_middleware(app, settings)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(tasks.router, prefix=settings.api_prefix)
if settings.debug_routes:
    app.include_router(debug.echo_router)
    app.include_router(debug.router, prefix=settings.api_prefix)


@app.get("/", tags=["meta"])
async def root():
    """Service banner listing the main endpoints."""
    return {
        "message": "Task Tracker API is running",
        "version": __version__,
        "endpoints": [
            "/health",
            f"{settings.api_prefix}/tasks",
            f"{settings.api_prefix}/tasks/{{id}}",
            f"{settings.api_prefix}/tasks/{{id}}/complete",
        ],
    }
