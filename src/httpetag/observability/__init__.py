"""Observability helpers for httpetag."""

from httpetag.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    configure_from_settings,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConsoleFormatter",
    "JsonFormatter",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
]
