"""Value extractors: category classification, date normalization, description composition."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date

from .mapping import FieldMapping, TargetField, get_field_value

DEFAULT_CATEGORY = "General Equipment"
NO_DETAILS = "No additional details available"

CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Power Tools",
        (
            "taladro", "martillo", "radial", "amoladora", "batidora", "sierra",
            "drill", "hammer", "grinder", "mixer", "saw", "cutter",
        ),
    ),
    (
        "Safety Equipment",
        (
            "arnes", "casco", "safety", "protective", "proteccion", "señal",
            "helmet", "harness", "signal", "warning", "guard",
        ),
    ),
    (
        "Hand Tools",
        (
            "llave", "destornillador", "pala", "martillo", "cincel",
            "wrench", "screwdriver", "shovel", "chisel", "pliers",
        ),
    ),
    ("Measuring Tools", ("metro", "nivel", "regla", "medidor", "measure", "level", "ruler", "gauge")),
    ("Power Equipment", ("grupo", "generador", "compresor", "motor", "generator", "compressor", "engine", "power")),
    ("Construction Materials", ("cable", "tubo", "material", "alambre", "pipe", "wire", "beam", "rod")),
)

DESCRIPTION_FIELDS: tuple[TargetField, ...] = (
    "brand",
    "model",
    "serialNumber",
    "specifications",
    "supplier",
    "quantity",
)

_US_SLASH = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})", re.ASCII)
_US_DASH = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})", re.ASCII)
_ISO_DASH = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)
_ISO_SLASH = re.compile(r"(\d{4})/(\d{1,2})/(\d{1,2})", re.ASCII)
_YEAR_ONLY = re.compile(r"(\d{4})", re.ASCII)


def categorize_item(item_name: str | None) -> str:
    """Return the first category whose keyword occurs in the item name."""

    name = (item_name or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def format_purchase_date(value: object, *, today: date | None = None) -> str | None:
    """Normalize a loosely formatted date cell to ``YYYY-MM-DD``.

    US-style ``MM/DD/YYYY`` and ``MM-DD-YYYY`` are reordered and zero padded,
    ISO-like values are returned as given, and a bare year becomes January
    1st when it lies in ``(1900, current year + 5]``. Anything else is ``None``.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    for pattern in (_US_SLASH, _US_DASH):
        match = pattern.search(text)
        if match:
            month, day, year = match.groups()
            return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    if _ISO_DASH.search(text) or _ISO_SLASH.search(text):
        return text

    match = _YEAR_ONLY.search(text)
    if match:
        year = int(match.group(1))
        current_year = (today or date.today()).year
        if 1900 < year <= current_year + 5:
            return f"{year}-01-01"

    return None


def build_description(row: Sequence[str], mappings: FieldMapping, headers: Sequence[str]) -> str:
    """Join ``"<header>: <value>"`` pairs for the secondary fields present in the row."""

    parts: list[str] = []
    for field_name in DESCRIPTION_FIELDS:
        index = mappings.get(field_name)
        value = get_field_value(row, index)
        if not value:
            continue
        label = headers[index] if index is not None and index < len(headers) else ""
        parts.append(f"{label or field_name}: {value}")

    return " | ".join(parts) or NO_DETAILS
