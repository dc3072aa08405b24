"""Health and readiness route definitions."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from inventory_extractor.api import deps
from inventory_extractor.core.config import AppSettings
from inventory_extractor.models.inventory import TARGET_FIELDS

health_router = APIRouter()
status_router = APIRouter()

SUPPORTED_FORMATS = ["PDF", "CSV", "PNG", "JPG"]


@health_router.get("/", summary="Liveness probe", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Report that the process is serving requests."""

    return {"status": "ok"}


@status_router.get("/status", summary="Analysis backend readiness", tags=["health"])
async def analyzer_status(settings: AppSettings = Depends(deps.get_app_settings)) -> dict[str, Any]:
    """Describe the configured analysis backend without exposing credentials."""

    return {
        "status": "Ready",
        "backend": settings.analysis_backend,
        "endpointConfigured": bool(settings.azure_endpoint),
        "apiKeyConfigured": bool(settings.azure_key),
        "targetFields": TARGET_FIELDS,
        "supportedFormats": SUPPORTED_FORMATS,
    }
