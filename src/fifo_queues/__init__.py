"""FIFO queues: one queue contract, ring buffer and linked list implementations."""

from fifo_queues.config import get_settings
from fifo_queues.DI import Container
from fifo_queues.exceptions import (
    InvalidCapacityError,
    InvalidElementError,
    QueueEmpty,
    QueueError,
)
from fifo_queues.queue import IQueue, LinkedQueue, QueueKind, RingBufferQueue, create_queue

__version__ = "0.1.0"
__all__ = [
    "Container",
    "IQueue",
    "InvalidCapacityError",
    "InvalidElementError",
    "LinkedQueue",
    "QueueEmpty",
    "QueueError",
    "QueueKind",
    "RingBufferQueue",
    "create_queue",
    "get_settings",
]
