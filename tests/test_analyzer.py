from __future__ import annotations

from types import SimpleNamespace

import pytest
from azure.core.exceptions import HttpResponseError

from inventory_extractor.core.config import AppSettings
from inventory_extractor.core.errors import ServiceError
from inventory_extractor.services import analyzer as analyzer_module
from inventory_extractor.services.analyzer import (
    AzureLayoutAnalyzer,
    PdfPlumberAnalyzer,
    get_analyzer,
    tables_from_azure,
    tables_from_grids,
)
from inventory_extractor.services.tables import TableCell


def test_tables_from_azure_copies_cell_coordinates() -> None:
    result = SimpleNamespace(
        tables=[
            SimpleNamespace(
                cells=[
                    SimpleNamespace(row_index=0, column_index=0, content="Nombre"),
                    SimpleNamespace(row_index=1, column_index=0, content=None),
                ]
            ),
            SimpleNamespace(cells=[]),
        ]
    )

    analysis = tables_from_azure(result)

    assert len(analysis.tables) == 2
    assert analysis.tables[0].cells == [
        TableCell(row_index=0, column_index=0, content="Nombre"),
        TableCell(row_index=1, column_index=0, content=""),
    ]
    assert analysis.tables[1].cells == []


def test_tables_from_azure_without_tables() -> None:
    assert tables_from_azure(SimpleNamespace(tables=None)).tables == []


def test_tables_from_grids_sanitizes_cells() -> None:
    analysis = tables_from_grids([[["Item ", None], [" Drill", 3]], []])

    assert len(analysis.tables) == 1
    assert analysis.tables[0].cells == [
        TableCell(row_index=0, column_index=0, content="Item"),
        TableCell(row_index=0, column_index=1, content=""),
        TableCell(row_index=1, column_index=0, content="Drill"),
        TableCell(row_index=1, column_index=1, content="3"),
    ]


def test_get_analyzer_follows_settings() -> None:
    azure = get_analyzer(AppSettings(analysis_backend="azure", azure_endpoint="https://x", azure_key="k"))
    local = get_analyzer(AppSettings(analysis_backend="pdfplumber"))

    assert isinstance(azure, AzureLayoutAnalyzer)
    assert azure.model_id == "prebuilt-layout"
    assert isinstance(local, PdfPlumberAnalyzer)


@pytest.mark.asyncio
async def test_azure_analyzer_requires_credentials() -> None:
    analyzer = AzureLayoutAnalyzer(endpoint=None, key=None)

    with pytest.raises(ServiceError) as exc_info:
        await analyzer.analyze(b"%PDF", "obra.pdf")

    assert "not configured" in exc_info.value.detail


class _FailingClient:
    def __init__(self, endpoint: str, credential: object) -> None:
        self.endpoint = endpoint

    async def __aenter__(self) -> "_FailingClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def begin_analyze_document(self, model_id: str, document: bytes) -> object:
        raise HttpResponseError(message="Quota exceeded")


class _Poller:
    def __init__(self, result: object) -> None:
        self._result = result

    async def result(self) -> object:
        return self._result


class _LayoutClient(_FailingClient):
    async def begin_analyze_document(self, model_id: str, document: bytes) -> _Poller:
        cell = SimpleNamespace(row_index=0, column_index=0, content="Herramienta")
        return _Poller(SimpleNamespace(tables=[SimpleNamespace(cells=[cell])]))


@pytest.mark.asyncio
async def test_azure_analyzer_wraps_sdk_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(analyzer_module, "DocumentAnalysisClient", _FailingClient)
    analyzer = AzureLayoutAnalyzer(endpoint="https://x", key="k")

    with pytest.raises(ServiceError) as exc_info:
        await analyzer.analyze(b"%PDF", "obra.pdf")

    assert "Quota exceeded" in exc_info.value.detail


@pytest.mark.asyncio
async def test_azure_analyzer_returns_tables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(analyzer_module, "DocumentAnalysisClient", _LayoutClient)
    analyzer = AzureLayoutAnalyzer(endpoint="https://x", key="k")

    analysis = await analyzer.analyze(b"%PDF", "obra.pdf")

    assert analysis.tables[0].cells == [TableCell(row_index=0, column_index=0, content="Herramienta")]


@pytest.mark.asyncio
async def test_pdfplumber_analyzer_rejects_non_pdf() -> None:
    with pytest.raises(ServiceError) as exc_info:
        await PdfPlumberAnalyzer().analyze(b"not a pdf", "scan.png")

    assert "scan.png" in exc_info.value.detail
