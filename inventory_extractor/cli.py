"""Typer-based CLI for running inventory extraction on local files."""

from __future__ import annotations

import asyncio
import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from inventory_extractor.core.config import get_settings
from inventory_extractor.core.errors import InventoryExtractionError
from inventory_extractor.core.logging import setup_logging
from inventory_extractor.models.inventory import ExtractionResult
from inventory_extractor.services.analyzer import get_analyzer
from inventory_extractor.services.extraction import extract_inventory

app = typer.Typer(help="Construction inventory extraction utilities")
console = Console()


class BackendChoice(str, Enum):
    azure = "azure"
    pdfplumber = "pdfplumber"


def _render_result(result: ExtractionResult) -> None:
    info = result.processing_info
    console.rule(f"[bold cyan]{result.project_name}[/] :: {info.service}")

    table = Table(show_header=True, header_style="bold magenta")
    for column in ("Item Name", "Category", "Purchase Date", "Condition", "Confidence"):
        table.add_column(column)

    for item in result.extracted_items:
        table.add_row(
            item.item_name,
            item.category,
            item.purchase_date or "Not specified",
            item.condition,
            f"{item.confidence}%",
        )

    console.print(table)
    typer.echo(f"Items extracted: {result.total_items}")
    typer.echo(f"Tables detected: {info.tables_detected}")
    typer.echo(f"Average confidence: {info.confidence_score}%")


@app.callback()
def main() -> None:
    """Extract inventory records from documents."""


@app.command()
def extract(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Document to analyze."),
    backend: Optional[BackendChoice] = typer.Option(
        None, "--backend", "-b", case_sensitive=False, help="Analysis backend. Defaults to settings."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw extraction result as JSON."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for structured logs."),
) -> None:
    """Run the extraction pipeline against a local document."""

    setup_logging(log_level)

    settings = get_settings()
    if backend is not None:
        settings = settings.model_copy(update={"analysis_backend": backend.value})

    analyzer = get_analyzer(settings)

    try:
        result = asyncio.run(extract_inventory(path.read_bytes(), path.name, analyzer))
    except InventoryExtractionError as exc:
        typer.secho(f"{exc.title}: {exc.detail}", fg=typer.colors.RED)
        if exc.hint:
            typer.echo(f"Solution: {exc.hint}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
        return

    _render_result(result)


if __name__ == "__main__":  # pragma: no cover
    app()
