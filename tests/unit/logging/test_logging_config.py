# -*- coding: utf-8 -*-
"""Unit tests for configure_logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from fifo_queues.config import Settings
from fifo_queues.logging.config import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_file_logging_writes_json_with_service_context(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "queues.log"
    settings = Settings.from_env(
        _env_file=None,
        app={"app_name": "fifo-test", "environment": "test"},
        logging={
            "log_to_console": False,
            "log_to_file": True,
            "log_file_path": str(log_file),
            "file_level": "DEBUG",
        },
    )

    configure_logging(settings)
    structlog.get_logger("RingBufferQueue").debug("ring_buffer_grown", new_capacity=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "ring_buffer_grown"
    assert record["new_capacity"] == 3
    assert record["level"] == "debug"
    assert record["logger"] == "RingBufferQueue"
    assert record["app_name"] == "fifo-test"
    assert record["environment"] == "test"


def test_level_filter_drops_debug_events(tmp_path: Path) -> None:
    log_file = tmp_path / "queues.log"
    settings = Settings.from_env(
        _env_file=None,
        logging={
            "log_to_console": False,
            "log_to_file": True,
            "log_file_path": str(log_file),
            "file_level": "INFO",
        },
    )

    configure_logging(settings)
    logger = structlog.get_logger("LinkedQueue")
    logger.debug("linked_queue_cleared", dropped=1)
    logger.info("demo_started")
    for handler in logging.getLogger().handlers:
        handler.flush()

    events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert events == ["demo_started"]
