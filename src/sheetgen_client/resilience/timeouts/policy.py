"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from sheetgen_client.kernel.errors import RequestError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Race an awaitable against a wall-clock countdown.

    ``asyncio.wait_for`` cancels the losing coroutine when the countdown
    fires and drops the timer handle when the coroutine finishes first, so
    each call owns exactly one timer and never sees a late result.
    """
    timeout_ms: int

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise RequestError.timeout(cause=exc) from exc


__all__ = ["TimeoutPolicy"]
