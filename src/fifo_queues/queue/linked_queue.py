# -*- coding: utf-8 -*-
"""FIFO queue over singly linked nodes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from fifo_queues.exceptions import InvalidElementError, QueueEmpty
from fifo_queues.logging import logger as library_logging
from fifo_queues.queue.base import IQueue


@dataclass(slots=True, eq=False)
class _Node[T]:
    data: T
    next: Optional[_Node[T]] = None


class LinkedQueue[T](IQueue[T]):
    """Queue stored as a chain of nodes from front (oldest) to rear (newest).

    enqueue/dequeue/peek/clear are O(1); contains() walks the chain.
    """

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = library_logging.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize an empty queue.

        Args:
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._front: Optional[_Node[T]] = None
        self._rear: Optional[_Node[T]] = None
        self._count = 0
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def enqueue(self, element: T) -> None:
        if element is None:
            raise InvalidElementError()

        node = _Node(data=element)
        if self._rear is None:
            self._front = node
            self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._count += 1

    def dequeue(self) -> T:
        node = self._front
        if node is None:
            raise QueueEmpty()

        self._front = node.next
        node.next = None
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.data

    def peek(self) -> T:
        if self._front is None:
            raise QueueEmpty()
        return self._front.data

    def is_empty(self) -> bool:
        return self._front is None

    def size(self) -> int:
        return self._count

    def clear(self) -> None:
        """Drop the whole chain; orphaned nodes are left to the garbage collector."""
        dropped = self._count
        self._front = None
        self._rear = None
        self._count = 0
        self._logger.debug("linked_queue_cleared", dropped=dropped)

    def contains(self, element: T) -> bool:
        if element is None:
            return False
        return any(e == element for e in self._elements())

    def _elements(self) -> Iterator[T]:
        current = self._front
        while current is not None:
            yield current.data
            current = current.next
