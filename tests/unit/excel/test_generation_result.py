"""Unit tests – GenerationResult model and preview helpers."""
from __future__ import annotations

import pytest

from sheetgen_client.excel import (
    PREVIEW_ROW_LIMIT,
    ColumnConfig,
    GenerationResult,
    HeaderStyle,
    header_alignment,
    preview_rows,
    summary_line,
    truncation_note,
)


def _result(**overrides: object) -> GenerationResult:
    data: dict[str, object] = {
        "success": True,
        "filename": "budget.xlsx",
        "columns": ["Month", "Income", "Expense"],
        "rows": [["Jan", 1000, 400.5], ["Feb", 1200, 380]],
        "total_rows": 2,
    }
    data.update(overrides)
    return GenerationResult.from_dict(data)


class TestGenerationResult:
    def test_required_fields(self) -> None:
        result = _result()
        assert result.success is True
        assert result.filename == "budget.xlsx"
        assert result.columns == ["Month", "Income", "Expense"]
        assert result.rows[0] == ["Jan", 1000, 400.5]
        assert result.header_style is None
        assert result.column_configs is None

    def test_optional_fields_omitted_from_dict_when_absent(self) -> None:
        assert set(_result().to_dict()) == {"success", "filename", "columns", "rows", "total_rows"}

    def test_mismatched_rows_are_kept(self) -> None:
        result = _result(rows=[["only one"], ["a", "b", "c", "d"]], total_rows=1)
        assert result.rows == [["only one"], ["a", "b", "c", "d"]]
        assert result.total_rows == 1

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            _result().filename = "other.xlsx"  # type: ignore[misc]


    def test_unknown_keys_kept_in_extra(self) -> None:
        result = _result(message="ok", request_id="r-1")
        assert result.extra == {"message": "ok", "request_id": "r-1"}
        assert result.to_dict()["request_id"] == "r-1"

    def test_non_object_rejected(self) -> None:
        with pytest.raises(TypeError):
            GenerationResult.from_dict([1, 2])


class TestStyleHints:
    def test_header_style_drops_absent_fields(self) -> None:
        style = HeaderStyle.from_dict({"bg_color": "4472C4", "bold": True})
        assert style.to_dict() == {"bg_color": "4472C4", "bold": True}

    def test_header_style_keeps_unknown_keys(self) -> None:
        data = {"bg_color": "000000", "border": True}
        style = HeaderStyle.from_dict(data)
        assert style.extra == {"border": True}
        assert style.to_dict() == data

    def test_column_style_keeps_unknown_keys(self) -> None:
        data = {"name": "Month", "style": {"alignment": "left", "wrap": True}}
        assert ColumnConfig.from_dict(data).to_dict() == data

    def test_css_color(self) -> None:
        assert HeaderStyle.css_color("4472C4") == "#4472C4"
        assert HeaderStyle.css_color("#FFFFFF") == "#FFFFFF"
        assert HeaderStyle.css_color(None) is None

    def test_column_config_style_alignment(self) -> None:
        config = ColumnConfig.from_dict({"name": "Income", "width": 12, "style": {"alignment": "right"}})
        assert config == ColumnConfig(name="Income", width=12, alignment="right")
        assert config.to_dict() == {"name": "Income", "width": 12, "style": {"alignment": "right"}}

    def test_column_config_without_style(self) -> None:
        config = ColumnConfig.from_dict({"name": "Month"})
        assert config.to_dict() == {"name": "Month"}


class TestPreview:
    def test_rows_limited(self) -> None:
        rows = [[str(i), i, i] for i in range(12)]
        result = _result(rows=rows, total_rows=12)
        assert len(preview_rows(result)) == PREVIEW_ROW_LIMIT
        assert preview_rows(result, limit=2) == [["0", 0, 0], ["1", 1, 1]]

    def test_short_rows_padded_and_long_rows_cut(self) -> None:
        result = _result(rows=[["Jan"], ["Feb", 1, 2, 3, 4]])
        assert preview_rows(result) == [["Jan", "", ""], ["Feb", 1, 2]]

    def test_summary_line(self) -> None:
        assert summary_line(_result(total_rows=40)) == "40 rows • 3 columns"

    def test_truncation_note(self) -> None:
        assert truncation_note(_result(total_rows=5)) is None
        assert truncation_note(_result(total_rows=40)) == "Showing 5 of 40 rows"

    def test_header_alignment_defaults_to_left(self) -> None:
        assert header_alignment(_result()) == "left"
        assert header_alignment(_result(header_style={"alignment": "center"})) == "center"
