"""Logging setup (structlog + Logfire)."""

import logging

from fifo_queues.logging.logger import ROOT_LOGGER_NAME, get_logger

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
