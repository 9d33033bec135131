"""Campus API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CampusError → structured JSON responses;
      the course registry router renders its own plain-text errors
    - CORS configured from settings (not hardcoded)
    - Database and registry store initialized on startup via lifespan context manager;
      the registry is optionally written back to its data file on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_api.api.error_handlers import register_error_handlers
from campus_api.api.routes import course_registry, health, housing_units, users
from campus_api.config import get_settings
from campus_api.infrastructure.database import close_db, init_db
from campus_api.infrastructure.observability import setup_logging
from campus_api.infrastructure.registry_data import load_registry, save_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.registry = load_registry(settings.registry_data_path)
    logger.info("Campus API started")
    yield
    if settings.registry_persist_on_shutdown and settings.registry_data_path:
        save_registry(app.state.registry, settings.registry_data_path)
    await close_db()
    logger.info("Campus API shutting down")


app = FastAPI(
    title="Campus API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(course_registry.router)
app.include_router(housing_units.router)
app.include_router(users.router)

register_error_handlers(app)
