"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from toolkit.api.v1.upload_router import router as upload_router
from toolkit.core.config import settings
from toolkit.core.exceptions import (
    AppException,
    UploadError,
    app_exception_handler,
    upload_exception_handler,
)
from toolkit.schemas.response_schema import ApiResponse, success_response

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
        upload_dir=str(settings.upload.upload_dir),
        max_file_size=settings.upload.effective_max_file_size,
    )
    if settings.app.is_development:
        settings.upload.upload_dir.mkdir(parents=True, exist_ok=True)
    yield
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app.name,
    description="Random string generation and multipart upload ingestion",
    version=settings.app.version,
    lifespan=lifespan,
    debug=settings.app.debug,
    openapi_url=settings.app.openapi_url,
)

# Exception handlers
app.add_exception_handler(UploadError, upload_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]


@app.get("/health", response_model=ApiResponse[dict])
async def health_check() -> dict:
    """Health check endpoint."""
    return success_response({"status": "healthy"})


@app.get("/", response_model=ApiResponse[dict])
async def root() -> dict:
    """Root endpoint."""
    return success_response(
        {
            "app": settings.app.name,
            "version": settings.app.version,
            "docs": "/docs",
        }
    )


# Register routers
app.include_router(upload_router)
