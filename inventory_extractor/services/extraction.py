"""Inventory extraction workflow: analysis result to inventory records."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from inventory_extractor.core.errors import EmptyTableError, UnsupportedFormatError
from inventory_extractor.core.logging import bound_context, get_logger
from inventory_extractor.models.inventory import ExtractionResult, InventoryItem, ProcessingInfo

from .analyzer import DocumentAnalyzer
from .extractors import build_description, categorize_item, format_purchase_date
from .mapping import FieldMapping, detect_field_mappings, get_field_value
from .scoring import calculate_item_confidence, validate_item
from .tables import AnalysisResult, RawTable, normalize_table

logger = get_logger(__name__)

DEFAULT_CONDITION = "Good"

_SPREADSHEET_SUFFIX = re.compile(r"\.(xlsx|xls)$", re.IGNORECASE)
_DOCUMENT_SUFFIX = re.compile(r"\.(pdf|csv|png|jpg|jpeg)$", re.IGNORECASE)


def ensure_supported_format(filename: str) -> None:
    """Reject spreadsheet binaries before any call to the analysis service."""

    if _SPREADSHEET_SUFFIX.search(filename or ""):
        raise UnsupportedFormatError(
            "Please convert Excel to PDF for best results",
            hint="Open Excel → File → Save As → PDF",
        )


def derive_project_name(filename: str) -> str:
    """``site_b-north.pdf`` -> ``SITE B NORTH``."""

    stem = _DOCUMENT_SUFFIX.sub("", filename or "")
    return re.sub(r"[-_]", " ", stem).upper()


def _row_is_blank(row: Sequence[str]) -> bool:
    return not any((cell or "").strip() for cell in row)


def build_item(
    row: Sequence[str],
    index: int,
    *,
    mappings: FieldMapping,
    headers: Sequence[str],
    project: str,
    source: str,
) -> InventoryItem:
    item_name = get_field_value(row, mappings.get("itemName")) or f"Item {index + 1}"

    return InventoryItem(
        id=f"azure_{index}",
        project=project,
        item_name=item_name.strip(),
        category=categorize_item(item_name),
        condition=get_field_value(row, mappings.get("condition")) or DEFAULT_CONDITION,
        purchase_date=format_purchase_date(get_field_value(row, mappings.get("purchaseDate"))),
        description=build_description(row, mappings, headers),
        confidence=calculate_item_confidence(row, mappings),
        validation_issues=validate_item(row, mappings),
        source=source,
    )


def build_items(table: RawTable, mappings: FieldMapping, *, project: str, source: str) -> list[InventoryItem]:
    """Map every non-blank row; blank rows are skipped but keep their index in item ids."""

    return [
        build_item(row, index, mappings=mappings, headers=table.headers, project=project, source=source)
        for index, row in enumerate(table.rows)
        if not _row_is_blank(row)
    ]


def average_confidence(items: Sequence[InventoryItem]) -> int:
    if not items:
        return 0
    return math.floor(sum(item.confidence for item in items) / len(items) + 0.5)


def build_extraction_result(
    analysis: AnalysisResult,
    filename: str,
    *,
    service: str,
    source: str,
) -> ExtractionResult:
    """Turn an analysis result into inventory records.

    Only the first detected table is mapped; any further tables are counted
    in ``tablesDetected`` and otherwise ignored.
    """

    project = derive_project_name(filename)
    tables = analysis.tables or []
    items: list[InventoryItem] = []
    mappings: FieldMapping = {}

    if tables:
        logger.info("extraction.tables_detected", tables=len(tables))
        try:
            table = normalize_table(tables[0].cells)
        except EmptyTableError:
            table = RawTable(headers=[], rows=[])

        if not table.is_empty:
            mappings = detect_field_mappings(table.headers)
            logger.info("extraction.field_mappings", mappings=mappings)
            items = build_items(table, mappings, project=project, source=source)

    return ExtractionResult(
        extracted_items=items,
        total_items=len(items),
        project_name=project,
        processing_info=ProcessingInfo(
            service=service,
            tables_detected=len(tables),
            confidence_score=average_confidence(items),
            field_mapping_success=bool(items),
            field_mappings=dict(mappings),
        ),
    )


async def extract_inventory(document: bytes, filename: str, analyzer: DocumentAnalyzer) -> ExtractionResult:
    """Check the format, analyze the document and map its first table to inventory items.

    Errors from ``analyzer`` propagate unchanged.
    """

    with bound_context(filename=filename, service=analyzer.service_name):
        logger.info("extraction.start", size=len(document))
        ensure_supported_format(filename)

        analysis = await analyzer.analyze(document, filename)
        result = build_extraction_result(
            analysis,
            filename,
            service=analyzer.service_name,
            source=analyzer.source_tag,
        )

        logger.info(
            "extraction.complete",
            items=result.total_items,
            confidence=result.processing_info.confidence_score,
        )
    return result
