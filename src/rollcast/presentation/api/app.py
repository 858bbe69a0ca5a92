"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rollcast.infrastructure.persistence.sqlalchemy.init_db import create_tables
from rollcast.presentation.api.dependencies import get_engine
from rollcast.presentation.api.exception_handlers import setup_exception_handlers
from rollcast.presentation.api.routers import (
    estimates_router,
    forecast_router,
    imports_router,
    transactions_router,
)
from rollcast.presentation.api.schemas import HealthResponse
from rollcast_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for rollcast modules and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("rollcast").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Imports",
        "description": """Bank statement import.

**Flow:**
1. `POST /imports/preview` parses, categorizes and deduplicates a CSV export
   without storing anything
2. `POST /imports` does the same and stores the surviving transactions

**Required columns:** Details, Posting Date, Description, Amount, Type,
Balance. `Check or Slip #` is optional.
""",
    },
    {
        "name": "Transactions",
        "description": "Imported transactions and session reset.",
    },
    {
        "name": "Estimates",
        "description": """Forecast line items per week and scenario.

Estimates can recur weekly, biweekly or monthly. Each belongs to exactly
one scenario (`base` by default).
""",
    },
    {
        "name": "Forecast",
        "description": """Rolling 13-week cashflow forecast.

**Week status:**
- `past`: actuals only
- `current`: actuals plus estimates and projections
- `future`: estimates and projections
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting rollcast API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down rollcast API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(imports_router, prefix="/imports", tags=["Imports"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(estimates_router, prefix="/estimates", tags=["Estimates"])
    v1_router.include_router(forecast_router, prefix="/forecast", tags=["Forecast"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Rolling **13-week cashflow forecast** from bank statements.",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for monitoring."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    return app


# Application instance for uvicorn
app = create_app()
