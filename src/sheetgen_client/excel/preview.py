"""Excel – helpers for rendering a result preview table."""
from __future__ import annotations

from sheetgen_client.excel.models import Cell, GenerationResult

PREVIEW_ROW_LIMIT = 5


def preview_rows(result: GenerationResult, limit: int = PREVIEW_ROW_LIMIT) -> list[list[Cell]]:
    """First *limit* rows, each padded with ``""`` or cut to the column count."""
    width = len(result.columns)
    rows: list[list[Cell]] = []
    for row in result.rows[: max(limit, 0)]:
        cells = list(row[:width])
        cells.extend([""] * (width - len(cells)))
        rows.append(cells)
    return rows


def summary_line(result: GenerationResult) -> str:
    return f"{result.total_rows} rows • {len(result.columns)} columns"


def truncation_note(result: GenerationResult, limit: int = PREVIEW_ROW_LIMIT) -> str | None:
    if result.total_rows > limit:
        return f"Showing {limit} of {result.total_rows} rows"
    return None


def header_alignment(result: GenerationResult) -> str:
    if result.header_style is not None and result.header_style.alignment:
        return result.header_style.alignment
    return "left"


__all__ = [
    "PREVIEW_ROW_LIMIT",
    "header_alignment",
    "preview_rows",
    "summary_line",
    "truncation_note",
]
