"""Cafe API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CafeError → plain-text responses
    - CORS configured from settings (not hardcoded)
    - Catalog loaded on startup via lifespan context manager, before requests are served

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Catalog load failure aborts startup (CatalogLoadError propagates out of lifespan)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cafe_api import __version__
from cafe_api.api.error_handlers import register_error_handlers
from cafe_api.api.routes import cafe, health
from cafe_api.config import get_settings
from cafe_api.infrastructure.catalog_store import init_catalog
from cafe_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_catalog(settings.catalog_file)
    logger.info("Cafe API started")
    yield
    logger.info("Cafe API shutting down")


app = FastAPI(
    title="Cafe API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cafe.router)

register_error_handlers(app)
