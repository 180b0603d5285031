"""HTTP adapter – RequestSpec and header merging."""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Mapping

HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})


def merge_headers(
    defaults: Mapping[str, str],
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return a new header map with *overrides* laid over *defaults*.

    Header names compare case-insensitively, so ``content-type`` in
    *overrides* replaces ``Content-Type`` from *defaults*. Neither input is
    mutated.
    """
    if not overrides:
        return dict(defaults)
    replaced = {name.lower() for name in overrides}
    merged = {name: value for name, value in defaults.items() if name.lower() not in replaced}
    merged.update(overrides)
    return merged


@dataclasses.dataclass(frozen=True)
class RequestSpec:
    """Everything about one request except where it goes.

    ``body`` is sent as-is when it is ``bytes`` or ``str``; any other
    non-``None`` value is serialised to JSON.
    """

    method: str = "GET"
    headers: Mapping[str, str] | None = None
    body: Any = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")
        object.__setattr__(self, "method", method)

    def content(self) -> bytes | None:
        if self.body is None:
            return None
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")


__all__ = ["HTTP_METHODS", "RequestSpec", "merge_headers"]
