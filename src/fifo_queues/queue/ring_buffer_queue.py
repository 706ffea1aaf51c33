# -*- coding: utf-8 -*-
"""Array-backed FIFO queue over a growable ring buffer."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from typing import Any, Optional

from fifo_queues.exceptions import InvalidCapacityError, InvalidElementError, QueueEmpty
from fifo_queues.logging import logger as library_logging
from fifo_queues.queue.base import IQueue


class RingBufferQueue[T](IQueue[T]):
    """Queue stored in a contiguous slot list used as a circular buffer.

    Logical element i lives at slot ``(front + i) % capacity``. When an enqueue
    finds every slot in use, the buffer grows by ``growth_factor`` and the live
    elements are copied to slots ``[0, count)`` of the new buffer. The buffer
    never shrinks. Every operation is O(1) except growth and contains(), which
    are O(n); growth is amortized O(1) per enqueue.
    """

    DEFAULT_CAPACITY = 10
    GROWTH_FACTOR = 1.5

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        *,
        growth_factor: float = GROWTH_FACTOR,
        get_logger: Callable[[str], Any] = library_logging.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize an empty queue.

        Args:
            initial_capacity: Number of slots allocated up front. Must be > 0.
            growth_factor: Multiplier applied to the capacity when the buffer is full.
                Must be finite and > 1.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).

        Raises:
            InvalidCapacityError: If initial_capacity is not a positive integer.
        """
        if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
            raise InvalidCapacityError(
                "Initial capacity must be a positive integer",
                capacity=initial_capacity,
            )
        if initial_capacity <= 0:
            raise InvalidCapacityError(capacity=initial_capacity)
        if not math.isfinite(growth_factor) or growth_factor <= 1:
            raise ValueError("growth_factor must be a finite number > 1")

        self._elements_buf: list[Optional[T]] = [None] * initial_capacity
        self._front = 0
        self._rear = 0
        self._count = 0
        self._growth_factor = growth_factor
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def capacity(self) -> int:
        """Current number of slots in the backing buffer."""
        return len(self._elements_buf)

    def enqueue(self, element: T) -> None:
        if element is None:
            raise InvalidElementError()
        if self._count == len(self._elements_buf):
            self._grow()

        self._elements_buf[self._rear] = element
        self._rear = (self._rear + 1) % len(self._elements_buf)
        self._count += 1

    def dequeue(self) -> T:
        if self._count == 0:
            raise QueueEmpty()

        element = self._elements_buf[self._front]
        # Release the slot so the buffer does not keep the element alive.
        self._elements_buf[self._front] = None
        self._front = (self._front + 1) % len(self._elements_buf)
        self._count -= 1
        return element  # type: ignore[return-value]

    def peek(self) -> T:
        if self._count == 0:
            raise QueueEmpty()
        return self._elements_buf[self._front]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count

    def clear(self) -> None:
        """Null every slot and reset indices; capacity is retained."""
        dropped = self._count
        for i in range(len(self._elements_buf)):
            self._elements_buf[i] = None
        self._front = 0
        self._rear = 0
        self._count = 0
        self._logger.debug("ring_buffer_cleared", dropped=dropped, capacity=self.capacity)

    def contains(self, element: T) -> bool:
        if element is None:
            return False
        return any(e == element for e in self._elements())

    def _elements(self) -> Iterator[T]:
        capacity = len(self._elements_buf)
        for i in range(self._count):
            yield self._elements_buf[(self._front + i) % capacity]  # type: ignore[misc]

    def _grow(self) -> None:
        """Reallocate with a larger capacity, unwrapping live elements to start at slot 0."""
        old_capacity = len(self._elements_buf)
        # floor(1 * 1.5) == 1, so always gain at least one slot.
        new_capacity = max(math.floor(old_capacity * self._growth_factor), old_capacity + 1)

        new_buf: list[Optional[T]] = [None] * new_capacity
        for i in range(self._count):
            new_buf[i] = self._elements_buf[(self._front + i) % old_capacity]

        self._elements_buf = new_buf
        self._front = 0
        self._rear = self._count
        self._logger.debug(
            "ring_buffer_grown",
            old_capacity=old_capacity,
            new_capacity=new_capacity,
            size=self._count,
        )
