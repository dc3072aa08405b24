"""Heuristic header-to-field mapping for arbitrary inventory spreadsheets."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Literal

TargetField = Literal[
    "itemName",
    "purchaseDate",
    "condition",
    "brand",
    "model",
    "serialNumber",
    "specifications",
    "supplier",
    "quantity",
]

FieldMapping = dict[TargetField, int]

# Declaration order is precedence: item identification is resolved first.
FIELD_PATTERNS: Mapping[TargetField, tuple[str, ...]] = MappingProxyType(
    {
        "itemName": (
            "nombre", "item", "descripcion", "description", "herramienta", "tool",
            "equipment", "producto", "product", "material", "articulo", "name",
        ),
        "purchaseDate": (
            "fecha", "date", "compra", "purchase", "año", "year", "adquisicion",
            "fechacompra", "purchasedate", "bought", "acquired",
        ),
        "condition": ("condicion", "condition", "estado", "state", "status", "situacion"),
        "brand": ("marca", "brand", "fabricante", "manufacturer"),
        "model": ("modelo", "model", "tipo", "type"),
        "serialNumber": ("serie", "serial", "numero", "nserie", "serialnumber"),
        "specifications": ("caracteristicas", "specs", "specifications", "features", "detalles"),
        "supplier": ("proveedor", "supplier", "vendor"),
        "quantity": ("cant", "cantidad", "qty", "quantity", "unidades", "units"),
    }
)

TARGET_FIELD_ORDER: tuple[TargetField, ...] = tuple(FIELD_PATTERNS)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_header(header: str | None) -> str:
    """Lowercase a header and keep only ASCII letters and digits."""

    return _NON_ALNUM.sub("", (header or "").lower())


def _matches(header: str, patterns: Sequence[str]) -> bool:
    return any(pattern in header or header in pattern for pattern in patterns)


def detect_field_mappings(headers: Sequence[str]) -> FieldMapping:
    """Assign each target field to the first column whose header matches one of its patterns.

    Matching is a bidirectional substring test on normalized headers. Fields
    without a match are left out of the result. A column claimed by one field
    can still be claimed by a later one.
    """

    normalized = [normalize_header(header) for header in headers]
    mappings: FieldMapping = {}

    for field_name in TARGET_FIELD_ORDER:
        patterns = FIELD_PATTERNS[field_name]
        for index, header in enumerate(normalized):
            if _matches(header, patterns):
                mappings[field_name] = index
                break

    return mappings


def get_field_value(row: Sequence[str], index: int | None) -> str:
    """Return the trimmed cell at ``index``, or ``""`` when unmapped or out of range."""

    if index is None or index < 0 or index >= len(row):
        return ""
    value = row[index]
    return "" if value is None else str(value).strip()
