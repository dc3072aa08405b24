"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .core.config import AppSettings, get_settings
from .core.errors import InventoryExtractionError, ServiceError
from .core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _check_analyzer_settings(settings: AppSettings) -> None:
    """Warn when the Azure backend is selected without credentials."""

    if settings.analysis_backend == "azure" and not settings.azure_configured:
        logger.warning(
            "analyzer.unconfigured",
            endpoint_set=bool(settings.azure_endpoint),
            key_set=bool(settings.azure_key),
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifecycle hooks for startup and shutdown."""

    settings = get_settings()
    setup_logging(settings.log_level)
    _check_analyzer_settings(settings)

    logger.info(
        "application.startup",
        environment=settings.environment,
        version=settings.version,
        analysis_backend=settings.analysis_backend,
    )

    try:
        yield
    finally:
        logger.info("application.shutdown")


async def _handle_extraction_error(request: Request, exc: InventoryExtractionError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception("extraction.failed", path=request.url.path, error=exc.detail)
    else:
        logger.warning("extraction.rejected", path=request.url.path, error=exc.detail)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Report failures outside the extraction error taxonomy with the same envelope."""

    logger.exception("extraction.failed", path=request.url.path, error=str(exc))
    error = ServiceError(str(exc) or exc.__class__.__name__)
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Construct the FastAPI application instance."""

    settings = settings or get_settings()

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    if settings.cors_allowed_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    application.add_exception_handler(InventoryExtractionError, _handle_extraction_error)
    application.add_exception_handler(Exception, _handle_unexpected_error)
    application.include_router(api_router, prefix="/v1")

    @application.get("/", tags=["meta"], summary="Service metadata")
    async def root() -> dict[str, str]:
        """Service metadata root endpoint."""

        return {"service": settings.project_name, "version": settings.version}

    return application


app = create_app()
