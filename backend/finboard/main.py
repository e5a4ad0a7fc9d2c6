"""Finboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FinboardError → {"error": {...}} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan owns logging setup and the engine; tests skip it and override get_db
    - Error handlers live in api/error_handlers.py (keeps this module's fan-out small)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import finboard.models  # noqa: F401
from finboard.api.error_handlers import register_error_handlers
from finboard.api.routes import accounts, categories, health, transactions
from finboard.config import get_settings
from finboard.infrastructure import database
from finboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Finboard API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Finboard API shutting down")


app = FastAPI(
    title="Finboard API", version="1.0.0", lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(categories.router)
app.include_router(transactions.router)

register_error_handlers(app)
