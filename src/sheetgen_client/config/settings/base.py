"""Config settings – environment-backed Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after every construction, whether from a loader or by hand.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for a bad combination."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``SheetGenSettings.env_key("timeout_ms")`` -> ``"SHEETGEN_TIMEOUT_MS"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        return {field.name: cls.env_key(field.name) for field in dataclasses.fields(cls)}


__all__ = ["Settings"]
