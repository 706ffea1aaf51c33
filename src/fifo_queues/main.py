# -*- coding: utf-8 -*-
"""
Demo driver for the queue implementations.

Orchestrates: logging, settings, container, then four walkthroughs that print the
queue rendering after each step (ring buffer, linked queue, empty-queue errors, contains).

Run with: python -m fifo_queues.main

Programmatic usage:
    from fifo_queues.main import run
    run(write=lines.append)
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fifo_queues.DI import Container
from fifo_queues.exceptions import QueueEmpty
from fifo_queues.logging.config import configure_logging
from fifo_queues.logging.logger import get_logger
from fifo_queues.queue import IQueue

Writer = Callable[[str], Any]


def demo_ring_buffer(queue: IQueue[int], write: Writer = print) -> None:
    """Fill with 10..50, inspect, then drain while printing each step."""
    write("Enqueue: 10, 20, 30, 40, 50")
    for value in (10, 20, 30, 40, 50):
        queue.enqueue(value)

    write(f"Queue: {queue}")
    write(f"Size: {queue.size()}")
    write(f"Front element: {queue.peek()}")

    write("")
    write("Dequeue elements:")
    while not queue.is_empty():
        write(f"Dequeued: {queue.dequeue()}")
        write(f"Current queue: {queue}")


def demo_linked(queue: IQueue[str], write: Writer = print) -> None:
    """Mix enqueues and dequeues on strings, then clear."""
    write("Enqueue strings")
    for value in ("First", "Second", "Third", "Fourth"):
        queue.enqueue(value)

    write(f"Queue: {queue}")
    write(f"Size: {queue.size()}")
    write(f"Front element: {queue.peek()}")

    write("")
    write("Dequeue 2 elements:")
    write(f"Dequeued: {queue.dequeue()}")
    write(f"Dequeued: {queue.dequeue()}")
    write(f"Current queue: {queue}")

    write("")
    write("Enqueue new elements:")
    queue.enqueue("Fifth")
    queue.enqueue("Sixth")
    write(f"Queue: {queue}")

    queue.clear()
    write("")
    write("After clear:")
    write(f"Is empty: {str(queue.is_empty()).lower()}")
    write(f"Size: {queue.size()}")


def demo_empty_errors(queue: IQueue[int], write: Writer = print) -> None:
    """Show that dequeue and peek on an empty queue raise QueueEmpty."""
    logger = get_logger("demo")
    try:
        queue.dequeue()
    except QueueEmpty as e:
        logger.debug("demo_dequeue_on_empty", error=str(e))
        write(f"Caught exception on dequeue: {type(e).__name__}")

    try:
        queue.peek()
    except QueueEmpty as e:
        logger.debug("demo_peek_on_empty", error=str(e))
        write(f"Caught exception on peek: {type(e).__name__}")


def demo_contains(queue: IQueue[str], write: Writer = print) -> None:
    """Check membership before and after removing the front element."""
    for value in ("Apple", "Banana", "Orange"):
        queue.enqueue(value)

    write(f"Queue: {queue}")
    write(f"Contains 'Apple': {str(queue.contains('Apple')).lower()}")
    write(f"Contains 'Grape': {str(queue.contains('Grape')).lower()}")
    write(f"Contains 'Banana': {str(queue.contains('Banana')).lower()}")

    queue.dequeue()
    write("")
    write("After removing the front element:")
    write(f"Queue: {queue}")
    write(f"Contains 'Apple': {str(queue.contains('Apple')).lower()}")


def run(write: Writer = print, container: Container | None = None) -> None:
    """Run every walkthrough, writing human-readable lines through write."""
    container = container or Container()
    logger = get_logger("main")
    logger.info("demo_started")

    write("=== RingBufferQueue demo ===")
    demo_ring_buffer(container.ring_buffer_queue(), write)

    write("")
    write("=== LinkedQueue demo ===")
    demo_linked(container.linked_queue(), write)

    write("")
    write("=== Empty queue errors demo ===")
    demo_empty_errors(container.ring_buffer_queue(), write)

    write("")
    write("=== contains demo ===")
    demo_contains(container.linked_queue(), write)

    logger.info("demo_finished")


def main() -> None:
    configure_logging()
    run()


if __name__ == "__main__":
    main()
