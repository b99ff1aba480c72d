"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from balance_tracker import __version__
from balance_tracker.config.settings import get_settings
from balance_tracker.config.logging_config import setup_logging
from balance_tracker.api.routers import employees_router
from balance_tracker.core.exceptions import AggregationError, AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    current = get_settings()
    logger.info(
        "Tracking wallets from %s via %s explorer %s (cache %s)",
        current.wallets_file,
        current.explorer_provider,
        current.explorer_api_url,
        current.cache_file,
    )
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Rolling daily balance history and transfers for tracked wallets",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(employees_router)


@app.exception_handler(AggregationError)
async def aggregation_error_handler(request: Request, exc: AggregationError) -> JSONResponse:
    """The whole run failed; no partial output."""
    return JSONResponse(
        status_code=500,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
