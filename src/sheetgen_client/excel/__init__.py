"""Excel – spreadsheet generation facade and result model."""
from sheetgen_client.excel.api import DOWNLOAD_PATH, GENERATE_PATH, ExcelAPI, get_excel_api
from sheetgen_client.excel.models import ColumnConfig, GenerationResult, HeaderStyle
from sheetgen_client.excel.preview import (
    PREVIEW_ROW_LIMIT,
    header_alignment,
    preview_rows,
    summary_line,
    truncation_note,
)

__all__ = [
    "DOWNLOAD_PATH",
    "GENERATE_PATH",
    "PREVIEW_ROW_LIMIT",
    "ColumnConfig",
    "ExcelAPI",
    "GenerationResult",
    "HeaderStyle",
    "get_excel_api",
    "header_alignment",
    "preview_rows",
    "summary_line",
    "truncation_note",
]
