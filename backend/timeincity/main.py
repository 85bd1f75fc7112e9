"""TimeInCity API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TimeInCityError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - City catalog built exactly once on startup and stored on app.state

Design Decisions:
    - Lifespan is the composition root: dataset IO happens here, core/ stays pure
    - A dataset that fails to load aborts startup (DatasetLoadError propagates):
      serving with an empty catalog would 404 every city page
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timeincity.api.error_handlers import register_error_handlers
from timeincity.api.routes import cities, health, regions
from timeincity.config import get_settings
from timeincity.core.city_catalog import build_catalog
from timeincity.infrastructure.city_dataset import load_raw_cities
from timeincity.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    raw = load_raw_cities(settings.city_dataset_path)
    app.state.catalog = build_catalog(raw)
    logger.info("TimeInCity API started")
    yield
    app.state.catalog = None
    logger.info("TimeInCity API shutting down")


app = FastAPI(
    title="TimeInCity API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(cities.router)
app.include_router(regions.router)

register_error_handlers(app)
