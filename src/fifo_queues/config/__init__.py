"""Configuration subpackage."""

from fifo_queues.config.config import (
    AppSettings,
    LoggingSettings,
    QueueSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "QueueSettings",
    "Settings",
    "get_settings",
]
