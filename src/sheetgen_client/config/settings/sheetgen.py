"""Config settings – SheetGenSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from sheetgen_client.config.settings.base import Settings
from sheetgen_client.config.validation import InvalidSettingValueError

DEFAULT_TIMEOUT_MS = 30_000


@dataclasses.dataclass
class SheetGenSettings(Settings):
    """Where the generation service lives and how long to wait for it.

    Read from ``SHEETGEN_SERVER_URL`` and ``SHEETGEN_TIMEOUT_MS``.
    """

    _prefix: ClassVar[str] = "SHEETGEN"

    server_url: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def _validate(self) -> None:
        if not self.server_url:
            raise InvalidSettingValueError("server_url", self.server_url, "must not be empty")
        if self.timeout_ms <= 0:
            raise InvalidSettingValueError("timeout_ms", self.timeout_ms, "must be positive")


__all__ = ["DEFAULT_TIMEOUT_MS", "SheetGenSettings"]
