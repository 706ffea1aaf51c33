# -*- coding: utf-8 -*-
"""FIFO queue contract and its implementations."""

from fifo_queues.queue.base import IQueue
from fifo_queues.queue.factory import QueueKind, create_queue
from fifo_queues.queue.linked_queue import LinkedQueue
from fifo_queues.queue.ring_buffer_queue import RingBufferQueue

__all__ = [
    "IQueue",
    "LinkedQueue",
    "QueueKind",
    "RingBufferQueue",
    "create_queue",
]
