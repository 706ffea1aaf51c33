# -*- coding: utf-8 -*-
"""Logger factory for library code.

Loggers wrap stdlib loggers under the ``fifo_queues`` namespace, so nothing is
written until the host application configures logging (see configure_logging).
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

ROOT_LOGGER_NAME = "fifo_queues"


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger ``fifo_queues.<name>``."""
    return structlog.wrap_logger(logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}"))
