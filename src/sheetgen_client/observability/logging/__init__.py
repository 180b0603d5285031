"""Observability – structlog configuration and logger helper."""
from sheetgen_client.observability.logging.factory import configure_logging
from sheetgen_client.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
