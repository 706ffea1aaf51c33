# -*- coding: utf-8 -*-
"""Build a queue for a given storage strategy."""

from __future__ import annotations

from enum import Enum

from fifo_queues.queue.base import IQueue
from fifo_queues.queue.linked_queue import LinkedQueue
from fifo_queues.queue.ring_buffer_queue import RingBufferQueue


class QueueKind(str, Enum):
    """Available backing strategies."""

    RING_BUFFER = "ring_buffer"
    LINKED = "linked"


def create_queue[T](
    kind: QueueKind | str,
    *,
    initial_capacity: int | None = None,
    growth_factor: float | None = None,
) -> IQueue[T]:
    """Return an empty queue backed by the requested strategy.

    Args:
        kind: QueueKind or its string value ("ring_buffer", "linked").
        initial_capacity: Ring buffer only; defaults to RingBufferQueue.DEFAULT_CAPACITY.
        growth_factor: Ring buffer only; defaults to RingBufferQueue.GROWTH_FACTOR.

    Raises:
        ValueError: If kind is not a known strategy.
        InvalidCapacityError: If initial_capacity is not positive.
    """
    kind = QueueKind(kind)
    if kind is QueueKind.LINKED:
        return LinkedQueue[T]()
    return RingBufferQueue[T](
        RingBufferQueue.DEFAULT_CAPACITY if initial_capacity is None else initial_capacity,
        growth_factor=RingBufferQueue.GROWTH_FACTOR if growth_factor is None else growth_factor,
    )
