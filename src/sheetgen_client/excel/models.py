"""Excel – generation result model.

Parsing is lenient: the service is trusted for shape, so rows whose length
differs from ``columns`` and a ``total_rows`` smaller than ``len(rows)`` pass
through untouched. Renderers should go through :mod:`sheetgen_client.excel.preview`.

Keys the model does not know are kept in ``extra`` and written back by
``to_dict``. Only a wrong container type (an object that is not an object, a
row that is not an array) raises ``TypeError``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Union

Cell = Union[str, int, float]


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _require_list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeError(f"{what} must be a JSON array, got {type(value).__name__}")
    return value


def _unknown(data: Mapping[str, Any], known: frozenset[str]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


@dataclasses.dataclass(frozen=True)
class HeaderStyle:
    """Presentation hints for the header row. Colours are hex without ``#``."""

    bg_color: str | None = None
    font_color: str | None = None
    bold: bool | None = None
    font_size: int | None = None
    alignment: str | None = None
    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    _KEYS = frozenset({"bg_color", "font_color", "bold", "font_size", "alignment"})

    @classmethod
    def from_dict(cls, data: Any) -> "HeaderStyle":
        data = _require_mapping(data, "header_style")
        return cls(
            bg_color=data.get("bg_color"),
            font_color=data.get("font_color"),
            bold=data.get("bold"),
            font_size=data.get("font_size"),
            alignment=data.get("alignment"),
            extra=_unknown(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        payload = _drop_none({key: getattr(self, key) for key in self._KEYS})
        payload.update(self.extra)
        return payload

    @staticmethod
    def css_color(value: str | None) -> str | None:
        """``"4472C4"`` -> ``"#4472C4"``."""
        if not value:
            return None
        return value if value.startswith("#") else f"#{value}"


@dataclasses.dataclass(frozen=True)
class ColumnConfig:
    name: str
    width: int | float | None = None
    alignment: str | None = None
    style_extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "ColumnConfig":
        data = _require_mapping(data, "column_configs item")
        style = _require_mapping(data.get("style") or {}, "column style")
        return cls(
            name=data.get("name", ""),
            width=data.get("width"),
            alignment=style.get("alignment"),
            style_extra=_unknown(style, frozenset({"alignment"})),
            extra=_unknown(data, frozenset({"name", "width", "style"})),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name}
        if self.width is not None:
            payload["width"] = self.width
        style = _drop_none({"alignment": self.alignment})
        style.update(self.style_extra)
        if style:
            payload["style"] = style
        payload.update(self.extra)
        return payload


@dataclasses.dataclass(frozen=True)
class GenerationResult:
    """A generated spreadsheet as described by the service.

    ``filename`` is both the storage key for the download endpoint and the
    suggested local file name. ``total_rows`` counts the full sheet; ``rows``
    may hold only a server-side preview slice.
    """

    success: bool
    filename: str
    columns: list[str]
    rows: list[list[Cell]]
    total_rows: int
    header_style: HeaderStyle | None = None
    column_configs: list[ColumnConfig] | None = None
    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    _KEYS = frozenset(
        {"success", "filename", "columns", "rows", "total_rows", "header_style", "column_configs"}
    )

    @classmethod
    def from_dict(cls, data: Any) -> "GenerationResult":
        """Build from a decoded response body.

        Raises ``TypeError`` when *data*, a row, or a nested object has the
        wrong JSON type.
        """
        data = _require_mapping(data, "generation result")
        header_style = data.get("header_style")
        column_configs = data.get("column_configs")
        rows = _require_list(data.get("rows") or [], "rows")
        return cls(
            success=data.get("success", False),
            filename=data.get("filename", ""),
            columns=list(_require_list(data.get("columns") or [], "columns")),
            rows=[list(_require_list(row, f"rows[{index}]")) for index, row in enumerate(rows)],
            total_rows=data.get("total_rows", 0),
            header_style=HeaderStyle.from_dict(header_style) if header_style is not None else None,
            column_configs=(
                [
                    ColumnConfig.from_dict(item)
                    for item in _require_list(column_configs, "column_configs")
                ]
                if column_configs is not None
                else None
            ),
            extra=_unknown(data, cls._KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape the service sent."""
        payload: dict[str, Any] = {
            "success": self.success,
            "filename": self.filename,
            "columns": list(self.columns),
            "rows": [list(row) for row in self.rows],
            "total_rows": self.total_rows,
        }
        if self.header_style is not None:
            payload["header_style"] = self.header_style.to_dict()
        if self.column_configs is not None:
            payload["column_configs"] = [config.to_dict() for config in self.column_configs]
        payload.update(self.extra)
        return payload


__all__ = ["Cell", "ColumnConfig", "GenerationResult", "HeaderStyle"]
