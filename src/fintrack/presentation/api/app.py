"""FastAPI application factory.

All API endpoints are versioned under the /api/v1/ prefix. The health
check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fintrack.domain.shared.time import utc_now
from fintrack.infrastructure.persistence.sqlalchemy.database import create_tables
from fintrack.presentation.api.dependencies import get_engine
from fintrack.presentation.api.exception_handlers import setup_exception_handlers
from fintrack.presentation.api.routers import (
    auth_router,
    categories_router,
    recurring_router,
    stats_router,
    transactions_router,
)
from fintrack.presentation.api.schemas.common import HealthResponse
from fintrack_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for fintrack modules (from settings)
    - WARNING level for noisy third-party libraries
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

    logging.getLogger("fintrack").setLevel(log_level)
    logging.getLogger("fintrack_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": "Register, log in and manage the account. Tokens are "
        "long-lived bearer JWTs; there is no refresh flow.",
    },
    {
        "name": "Transactions",
        "description": "Income and expense entries, including quick entry "
        "and category suggestions.",
    },
    {
        "name": "Recurring",
        "description": """Recurring transaction rules.

**Schedule:**
- `DAILY`, `WEEKLY`, `MONTHLY` or `YEARLY`, every `interval` periods
- The first occurrence is one period after `start_date`
- Month ends are clamped (Jan 31 + 1 month = Feb 28/29)

**Processing:**
- `POST /recurring/process` creates one transaction per due rule
- Rules several periods behind advance one step per call
- A rule is deactivated once its next run would pass `end_date`
""",
    },
    {
        "name": "Categories",
        "description": "Favorite categories for quick entry (30 per type).",
    },
    {
        "name": "Stats",
        "description": "Monthly budget summary and six-month trend.",
    },
    {"name": "Health", "description": "Service health monitoring endpoints."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting fintrack API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down fintrack API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(
        transactions_router,
        prefix="/transactions",
        tags=["Transactions"],
    )
    v1_router.include_router(recurring_router, prefix="/recurring", tags=["Recurring"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(stats_router, prefix="/stats", tags=["Stats"])

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
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Personal finance tracking with recurring transactions.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
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
        """Unversioned for load balancer/monitoring compatibility."""
        return HealthResponse(
            status="ok",
            timestamp=utc_now(),
            environment=settings.environment,
        )

    @app.get("/", tags=["Health"])
    async def root() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "api_base": API_V1_PREFIX,
        }

    return app


# Application instance for uvicorn
app = create_app()
