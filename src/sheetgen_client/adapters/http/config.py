"""HTTP adapter – ClientConfig."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Mapping

from sheetgen_client.adapters.http.request_spec import merge_headers
from sheetgen_client.config import InvalidSettingValueError, SheetGenSettings
from sheetgen_client.config.settings import DEFAULT_TIMEOUT_MS

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({"Content-Type": "application/json"})


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings owned by one :class:`BoundedHttpClient`.

    ``headers`` are laid over :data:`DEFAULT_HEADERS` at construction and
    exposed read-only.
    """

    base_url: str
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise InvalidSettingValueError("timeout_ms", self.timeout_ms, "must be positive")
        object.__setattr__(
            self, "headers", MappingProxyType(merge_headers(DEFAULT_HEADERS, self.headers))
        )

    @classmethod
    def from_settings(
        cls,
        settings: SheetGenSettings,
        headers: Mapping[str, str] | None = None,
    ) -> "ClientConfig":
        return cls(
            base_url=settings.server_url,
            headers=dict(headers or {}),
            timeout_ms=settings.timeout_ms,
        )


__all__ = ["DEFAULT_HEADERS", "ClientConfig"]
