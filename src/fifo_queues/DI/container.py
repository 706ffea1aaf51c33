# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from fifo_queues.config import Settings, get_settings
from fifo_queues.queue import IQueue, LinkedQueue, QueueKind, RingBufferQueue, create_queue


def _build_ring_buffer_queue(settings: Settings) -> RingBufferQueue[Any]:
    """Build an empty ring buffer queue sized from settings."""
    return RingBufferQueue[Any](
        settings.queue.initial_capacity,
        growth_factor=settings.queue.growth_factor,
    )


def _build_default_queue(settings: Settings) -> IQueue[Any]:
    """Build an empty queue of the configured default kind."""
    return create_queue(
        QueueKind(settings.queue.default_kind),
        initial_capacity=settings.queue.initial_capacity,
        growth_factor=settings.queue.growth_factor,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings and queue factories.

    Every queue provider is a Factory: each call returns a new, empty queue.
    """

    config = providers.Callable(get_settings)

    ring_buffer_queue = providers.Factory(_build_ring_buffer_queue, config)

    linked_queue = providers.Factory(LinkedQueue)

    queue = providers.Factory(_build_default_queue, config)
