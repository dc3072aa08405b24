"""Error taxonomy for document extraction failures."""

from __future__ import annotations

from typing import Any


class InventoryExtractionError(Exception):
    """Base class for failures surfaced to API and CLI callers."""

    title = "Processing failed"
    status_code = 500

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.hint = hint

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.title, "details": self.detail}
        if self.hint:
            payload["solution"] = self.hint
        return payload


class UnsupportedFormatError(InventoryExtractionError):
    """Raised for spreadsheet binaries the analysis service cannot read directly."""

    title = "Excel format requires conversion"
    status_code = 400


class ServiceError(InventoryExtractionError):
    """Raised when the external document-analysis call fails."""

    title = "Processing failed"
    status_code = 500

    def __init__(self, detail: str, *, hint: str | None = "Try converting to PDF or check file format") -> None:
        super().__init__(detail, hint=hint)


class EmptyTableError(ValueError):
    """Raised by the table normalizer when a table carries no cells."""
