"""Pydantic schemas for extracted inventory records."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Severity = Literal["error", "warning", "info"]

TARGET_FIELDS: dict[str, str] = {
    "project": "Project name or work site",
    "itemName": "Tool/equipment name or description",
    "category": "Equipment category (auto-assigned)",
    "condition": "Current condition (defaults to Good)",
    "purchaseDate": "Date purchased (YYYY-MM-DD format)",
    "description": "Additional details and specifications",
}


class CamelModel(BaseModel):
    """Base model serialising snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationIssue(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    field: str = Field(..., description="Target field the issue refers to.")
    message: str = Field(..., description="Human readable explanation.")
    severity: Severity = Field(default="error")


class InventoryItem(CamelModel):
    """One inventory record mapped from a single table row."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    project: str
    item_name: str
    category: str
    condition: str = "Good"
    purchase_date: str | None = None
    description: str
    confidence: int = Field(..., ge=0, le=100)
    validation_issues: list[ValidationIssue] = Field(default_factory=list)
    source: str


class ProcessingInfo(CamelModel):
    service: str
    tables_detected: int = 0
    confidence_score: int = 0
    target_fields: list[str] = Field(default_factory=lambda: list(TARGET_FIELDS))
    field_mapping_success: bool = False
    field_mappings: dict[str, int] = Field(default_factory=dict)


class ExtractionResult(CamelModel):
    """Aggregate response for one uploaded document."""

    success: bool = True
    extracted_items: list[InventoryItem] = Field(default_factory=list)
    total_items: int = 0
    project_name: str
    processing_info: ProcessingInfo


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
    solution: str | None = None
