from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from inventory_extractor import cli
from inventory_extractor.core.errors import ServiceError
from inventory_extractor.services.tables import AnalysisResult, AnalyzedTable, TableCell

runner = CliRunner()


class StubAnalyzer:
    service_name = "Stub Analysis"
    source_tag = "stub"

    def __init__(self, *, error: Exception | None = None) -> None:
        self._error = error

    async def analyze(self, document: bytes, filename: str) -> AnalysisResult:
        if self._error is not None:
            raise self._error
        cells = [
            TableCell(0, 0, "Herramienta"),
            TableCell(0, 1, "Modelo"),
            TableCell(1, 0, "Amoladora"),
            TableCell(1, 1, "GWS 700"),
        ]
        return AnalysisResult(tables=[AnalyzedTable(cells=cells)])


@pytest.fixture
def document(tmp_path: Path) -> Path:
    path = tmp_path / "obra_sur.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


def test_extract_prints_json(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    monkeypatch.setattr(cli, "get_analyzer", lambda settings: StubAnalyzer())

    result = runner.invoke(cli.app, ["extract", str(document), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["projectName"] == "OBRA SUR"
    item = payload["extractedItems"][0]
    assert item["itemName"] == "Amoladora"
    assert item["category"] == "Power Tools"
    assert item["description"] == "Modelo: GWS 700"
    assert item["confidence"] == 65


def test_extract_renders_summary(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    monkeypatch.setattr(cli, "get_analyzer", lambda settings: StubAnalyzer())

    result = runner.invoke(cli.app, ["extract", str(document)])

    assert result.exit_code == 0, result.output
    assert "Amoladora" in result.output
    assert "Items extracted: 1" in result.output


def test_extract_reports_service_errors(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    monkeypatch.setattr(cli, "get_analyzer", lambda settings: StubAnalyzer(error=ServiceError("timeout")))

    result = runner.invoke(cli.app, ["extract", str(document)])

    assert result.exit_code == 1
    assert "Processing failed: timeout" in result.output


def test_extract_rejects_excel(tmp_path: Path) -> None:
    path = tmp_path / "inventario.xlsx"
    path.write_bytes(b"PK")

    result = runner.invoke(cli.app, ["extract", str(path), "--backend", "pdfplumber"])

    assert result.exit_code == 1
    assert "Excel format requires conversion" in result.output


def test_extract_selects_backend_case_insensitively(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    chosen: list[str] = []

    def fake_get_analyzer(settings):
        chosen.append(settings.analysis_backend)
        return StubAnalyzer()

    monkeypatch.setattr(cli, "get_analyzer", fake_get_analyzer)

    result = runner.invoke(cli.app, ["extract", str(document), "--backend", "PDFPLUMBER", "--json"])

    assert result.exit_code == 0, result.output
    assert chosen == ["pdfplumber"]


def test_extract_rejects_unknown_backend(monkeypatch: pytest.MonkeyPatch, document: Path) -> None:
    calls: list[object] = []
    monkeypatch.setattr(cli, "get_analyzer", lambda settings: calls.append(settings) or StubAnalyzer())

    result = runner.invoke(cli.app, ["extract", str(document), "--backend", "textract"])

    assert result.exit_code == 2
    assert calls == []
