"""Configuration module for Table Reader."""

from table_reader.config.settings import (
    LoggingSettings,
    ReaderSettings,
    Settings,
    SourceSettings,
    get_settings,
)

__all__ = [
    "Settings",
    "ReaderSettings",
    "SourceSettings",
    "LoggingSettings",
    "get_settings",
]
