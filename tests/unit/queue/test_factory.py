# -*- coding: utf-8 -*-
"""Unit tests for create_queue / QueueKind."""

from __future__ import annotations

import pytest

from fifo_queues.exceptions import InvalidCapacityError
from fifo_queues.queue import LinkedQueue, QueueKind, RingBufferQueue, create_queue


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (QueueKind.RING_BUFFER, RingBufferQueue),
        (QueueKind.LINKED, LinkedQueue),
        ("ring_buffer", RingBufferQueue),
        ("linked", LinkedQueue),
    ],
)
def test_create_queue_selects_implementation(kind: QueueKind | str, expected: type) -> None:
    queue = create_queue(kind)
    assert isinstance(queue, expected)
    assert queue.is_empty() is True


def test_create_queue_uses_ring_buffer_defaults() -> None:
    queue = create_queue(QueueKind.RING_BUFFER)
    assert isinstance(queue, RingBufferQueue)
    assert queue.capacity == RingBufferQueue.DEFAULT_CAPACITY


def test_create_queue_passes_ring_buffer_options() -> None:
    queue = create_queue("ring_buffer", initial_capacity=4, growth_factor=2.0)
    assert isinstance(queue, RingBufferQueue)
    for value in range(5):
        queue.enqueue(value)
    assert queue.capacity == 8


def test_create_queue_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        create_queue("priority")


def test_create_queue_rejects_bad_capacity() -> None:
    with pytest.raises(InvalidCapacityError):
        create_queue(QueueKind.RING_BUFFER, initial_capacity=0)


def test_linked_queue_ignores_ring_buffer_options() -> None:
    queue = create_queue(QueueKind.LINKED, initial_capacity=0)
    assert isinstance(queue, LinkedQueue)


def test_queue_kind_values_are_plain_strings() -> None:
    assert isinstance(QueueKind.LINKED, str)
    assert QueueKind.LINKED == "linked"
    assert QueueKind("ring_buffer") is QueueKind.RING_BUFFER
