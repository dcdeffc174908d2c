"""Munro API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MunroApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Dataset loaded exactly once on startup via lifespan; never reloaded

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - A failed load leaves an empty dataset on app.state: the process stays up and
      the readiness probe reports not_ready
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from munro_api.api.error_handlers import register_error_handlers
from munro_api.api.routes import health, munros
from munro_api.config import Settings, get_settings
from munro_api.core.dataset import MunroDataset
from munro_api.infrastructure.dataset_loader import load_munros
from munro_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def load_dataset(settings: Settings) -> MunroDataset:
    """Load the Munro table described by settings. Never raises."""
    result = load_munros(
        settings.munro_csv_path,
        rejection_policy=settings.row_rejection_policy,
        encoding=settings.munro_csv_encoding,
    )
    return result.dataset


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.dataset = load_dataset(settings)
    logger.info(
        "Munro API started",
        extra={"record_count": len(app.state.dataset)},
    )
    yield
    logger.info("Munro API shutting down")


app = FastAPI(
    title="Munro API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(munros.router)

register_error_handlers(app)
