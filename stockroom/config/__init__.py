"""Configuration module."""

from stockroom.config.logging import configure_logging, get_logger, workflow_context
from stockroom.config.settings import (
    LedgerSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "StorageSettings",
    "LedgerSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "workflow_context",
]
