# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from fifo_queues.config import get_settings
from fifo_queues.queue import IQueue, LinkedQueue, RingBufferQueue


class RecordingLogger:
    """Minimal structlog stand-in that records (method, event, kwargs)."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, event: str, **kwargs: Any) -> None:
        self.calls.append(("debug", event, kwargs))

    def info(self, event: str, **kwargs: Any) -> None:
        self.calls.append(("info", event, kwargs))

    def events(self) -> list[str]:
        return [event for _, event, _ in self.calls]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Logger that captures events emitted by a queue."""
    return RecordingLogger("test")


@pytest.fixture
def get_recording_logger(recording_logger: RecordingLogger) -> Callable[[str], RecordingLogger]:
    """Logger factory returning the shared recording logger."""
    return lambda name: recording_logger


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Drop cached Settings so env overrides in one test do not leak into others."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=["ring_buffer", "linked"])
def queue_factory(request: pytest.FixtureRequest) -> Callable[[], IQueue[Any]]:
    """Build empty queues of each implementation (tests run once per kind)."""
    if request.param == "linked":
        return LinkedQueue
    # Small capacity so contract tests also cross growth and wrap-around.
    return lambda: RingBufferQueue(2)


@pytest.fixture
def queue(queue_factory: Callable[[], IQueue[Any]]) -> IQueue[Any]:
    """Fresh empty queue, once per implementation."""
    return queue_factory()
