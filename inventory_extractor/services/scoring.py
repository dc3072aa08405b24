"""Per-row confidence scoring and validation."""

from __future__ import annotations

from collections.abc import Sequence

from inventory_extractor.models.inventory import ValidationIssue

from .mapping import FieldMapping, TargetField, get_field_value

CONFIDENCE_WEIGHTS: tuple[tuple[TargetField, int], ...] = (
    ("itemName", 50),
    ("brand", 15),
    ("model", 15),
    ("purchaseDate", 10),
    ("specifications", 10),
)
MAX_CONFIDENCE = 100


def calculate_item_confidence(row: Sequence[str], mappings: FieldMapping) -> int:
    score = sum(
        weight for field_name, weight in CONFIDENCE_WEIGHTS if get_field_value(row, mappings.get(field_name))
    )
    return min(score, MAX_CONFIDENCE)


def validate_item(row: Sequence[str], mappings: FieldMapping) -> list[ValidationIssue]:
    """Return data-quality issues for a row; the item name is the only required field."""

    issues: list[ValidationIssue] = []
    if not get_field_value(row, mappings.get("itemName")):
        issues.append(ValidationIssue(field="itemName", message="Item name is required", severity="error"))
    return issues
