"""Sparse analysis tables and their dense header/row representation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from inventory_extractor.core.errors import EmptyTableError


@dataclass(slots=True, frozen=True)
class TableCell:
    row_index: int
    column_index: int
    content: str | None = None


@dataclass(slots=True)
class AnalyzedTable:
    """A table as reported by the analysis service: one entry per detected cell."""

    cells: list[TableCell] = field(default_factory=list)


@dataclass(slots=True)
class AnalysisResult:
    tables: list[AnalyzedTable] = field(default_factory=list)


@dataclass(slots=True)
class RawTable:
    """Dense table: row 0 of the source becomes ``headers``; every row is ``len(headers)`` wide."""

    headers: list[str]
    rows: list[list[str]]

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows


def normalize_table(cells: Iterable[TableCell]) -> RawTable:
    """Convert sparse cells into a rectangular table, filling gaps with empty strings.

    Raises:
        EmptyTableError: when ``cells`` is empty.
    """

    cell_map: dict[tuple[int, int], str] = {}
    max_row = -1
    max_col = -1

    for cell in cells:
        cell_map[(cell.row_index, cell.column_index)] = cell.content or ""
        max_row = max(max_row, cell.row_index)
        max_col = max(max_col, cell.column_index)

    if not cell_map:
        raise EmptyTableError("Table contains no cells")

    headers = [cell_map.get((0, col), "") for col in range(max_col + 1)]
    rows = [
        [cell_map.get((row, col), "") for col in range(max_col + 1)]
        for row in range(1, max_row + 1)
    ]

    return RawTable(headers=headers, rows=rows)
