"""Resilience – bounded execution of remote calls."""
from sheetgen_client.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
