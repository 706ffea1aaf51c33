# -*- coding: utf-8 -*-
"""FIFO queue interface shared by every storage strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class IQueue[T](ABC):
    """Abstract interface for a first-in-first-out queue.

    Implementations choose the backing storage (ring buffer, linked nodes, ...)
    but must expose the same observable behaviour: elements leave in the order
    they arrived and ``size()`` is always the number of live elements.
    Use the exceptions from queue.exceptions (QueueEmpty, InvalidElementError)
    where specified.

    Not thread-safe: callers sharing an instance across threads must
    synchronize around every call.
    """

    @abstractmethod
    def enqueue(self, element: T) -> None:
        """Append element at the rear of the queue.

        Args:
            element: The element to add. Must not be None.

        Raises:
            InvalidElementError: If element is None.
        """
        ...

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the front element.

        Returns:
            The element that has been in the queue the longest.

        Raises:
            QueueEmpty: If the queue holds no elements.
        """
        ...

    @abstractmethod
    def peek(self) -> T:
        """Return the front element without removing it.

        Returns:
            The element the next dequeue() would return.

        Raises:
            QueueEmpty: If the queue holds no elements.
        """
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements currently in the queue."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every element. The queue stays usable afterwards."""
        ...

    @abstractmethod
    def contains(self, element: T) -> bool:
        """Return True if an element equal (==) to the argument is in the queue.

        Equality is by value, not identity. None is never contained.
        """
        ...

    @abstractmethod
    def _elements(self) -> Iterator[T]:
        """Yield live elements front to rear without mutating the queue."""
        ...

    def __len__(self) -> int:
        """Return the number of elements in the queue."""
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Render as ``Queue: [e0, e1, ...]`` front to rear."""
        return "Queue: [" + ", ".join(str(e) for e in self._elements()) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size()})"
