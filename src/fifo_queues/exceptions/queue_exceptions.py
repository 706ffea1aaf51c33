"""Queue-specific exceptions."""

from __future__ import annotations


class QueueError(Exception):
    """Base exception for queue operations."""


class QueueEmpty(QueueError):
    """Raised when taking or inspecting the front element of an empty queue (dequeue/peek)."""

    def __init__(self, message: str = "Queue is empty") -> None:
        super().__init__(message)


class InvalidCapacityError(QueueError, ValueError):
    """Raised when an array-backed queue is built with a non-positive initial capacity."""

    def __init__(
        self,
        message: str = "Initial capacity must be positive",
        *,
        capacity: object = None,
    ) -> None:
        super().__init__(message)
        self.capacity = capacity


class InvalidElementError(QueueError, ValueError):
    """Raised when None is offered to enqueue; None is never a queued value."""

    def __init__(self, message: str = "None is not a valid queue element") -> None:
        super().__init__(message)
