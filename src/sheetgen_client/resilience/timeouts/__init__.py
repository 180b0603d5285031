"""Resilience – timeout policies."""
from sheetgen_client.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
