"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Depends

from inventory_extractor.core.config import AppSettings, get_settings
from inventory_extractor.services import analyzer


def get_app_settings() -> AppSettings:
    """Expose application settings as a dependency."""

    return get_settings()


def get_document_analyzer(
    settings: AppSettings = Depends(get_app_settings),
) -> analyzer.DocumentAnalyzer:
    """Construct the analyzer selected in settings."""

    return analyzer.get_analyzer(settings)
