"""Exceptions subpackage."""

from fifo_queues.exceptions.queue_exceptions import (
    InvalidCapacityError,
    InvalidElementError,
    QueueEmpty,
    QueueError,
)

__all__ = [
    "InvalidCapacityError",
    "InvalidElementError",
    "QueueEmpty",
    "QueueError",
]
