"""Document-analysis backends that turn uploaded bytes into sparse tables."""

from __future__ import annotations

import asyncio
import io
from typing import Any, Protocol

import pdfplumber
from azure.ai.formrecognizer.aio import DocumentAnalysisClient
from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import AzureError

from inventory_extractor.core.config import AppSettings
from inventory_extractor.core.errors import ServiceError
from inventory_extractor.core.logging import get_logger

from .tables import AnalysisResult, AnalyzedTable, TableCell

logger = get_logger(__name__)


class DocumentAnalyzer(Protocol):
    service_name: str
    source_tag: str

    async def analyze(self, document: bytes, filename: str) -> AnalysisResult: ...


def tables_from_azure(result: Any) -> AnalysisResult:
    """Copy the cell coordinates of an Azure ``AnalyzeResult`` into plain dataclasses."""

    tables: list[AnalyzedTable] = []
    for table in getattr(result, "tables", None) or []:
        cells = [
            TableCell(row_index=cell.row_index, column_index=cell.column_index, content=cell.content or "")
            for cell in table.cells or []
        ]
        tables.append(AnalyzedTable(cells=cells))
    return AnalysisResult(tables=tables)


class AzureLayoutAnalyzer:
    """Azure Document Intelligence client running the layout model."""

    service_name = "Azure Document Intelligence"
    source_tag = "azure_ai"

    def __init__(self, *, endpoint: str | None, key: str | None, model_id: str = "prebuilt-layout") -> None:
        self.endpoint = endpoint
        self.key = key
        self.model_id = model_id

    async def analyze(self, document: bytes, filename: str) -> AnalysisResult:
        if not self.endpoint or not self.key:
            raise ServiceError(
                "Azure endpoint and key are not configured.",
                hint="Set AZURE_ENDPOINT and AZURE_KEY in the environment or .env file",
            )

        logger.info("analyzer.azure.submit", filename=filename, size=len(document), model_id=self.model_id)
        try:
            async with DocumentAnalysisClient(self.endpoint, AzureKeyCredential(self.key)) as client:
                poller = await client.begin_analyze_document(self.model_id, document=document)
                result = await poller.result()
        except AzureError as exc:
            raise ServiceError(str(exc)) from exc

        logger.info("analyzer.azure.complete", filename=filename, tables=len(result.tables or []))
        return tables_from_azure(result)


def _sanitize_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def tables_from_grids(grids: list[list[list[Any]]]) -> AnalysisResult:
    """Convert row-major table grids (first row = header) into sparse cells."""

    tables: list[AnalyzedTable] = []
    for grid in grids:
        if not grid:
            continue
        cells = [
            TableCell(row_index=row_index, column_index=column_index, content=_sanitize_cell(value))
            for row_index, row in enumerate(grid)
            for column_index, value in enumerate(row or [])
        ]
        if cells:
            tables.append(AnalyzedTable(cells=cells))
    return AnalysisResult(tables=tables)


class PdfPlumberAnalyzer:
    """Local table extraction for text-based PDFs, without a remote service."""

    service_name = "pdfplumber"
    source_tag = "pdfplumber"

    async def analyze(self, document: bytes, filename: str) -> AnalysisResult:
        return await asyncio.to_thread(self._analyze_sync, document, filename)

    def _analyze_sync(self, document: bytes, filename: str) -> AnalysisResult:
        grids: list[list[list[Any]]] = []
        try:
            with pdfplumber.open(io.BytesIO(document)) as pdf:
                for page in pdf.pages:
                    grids.extend(page.extract_tables() or [])
        except Exception as exc:  # noqa: BLE001 - pdfminer raises a variety of parse errors
            raise ServiceError(f"Unable to read {filename} as PDF: {exc}") from exc

        logger.info("analyzer.pdfplumber.complete", filename=filename, tables=len(grids))
        return tables_from_grids(grids)


def get_analyzer(settings: AppSettings) -> DocumentAnalyzer:
    """Build the analyzer selected by ``settings.analysis_backend``."""

    if settings.analysis_backend == "pdfplumber":
        return PdfPlumberAnalyzer()
    return AzureLayoutAnalyzer(
        endpoint=settings.azure_endpoint,
        key=settings.azure_key,
        model_id=settings.azure_model_id,
    )
