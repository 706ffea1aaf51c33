"""Dependency injection."""

from fifo_queues.DI.container import Container

__all__ = ["Container"]
