"""Outbox pattern implementation for reliable side effects.

This module provides the consumer-facing half of the transactional outbox
pattern: the event value objects, the ports a bounded context implements,
and the consumer's observability probe.
"""

from shared_kernel.outbox.exceptions import FetchError, OutboxError
from shared_kernel.outbox.ports import IOutboxEventReader, OutboxEventHandler
from shared_kernel.outbox.value_objects import BatchResult, EventOutcome, OutboxEvent

__all__ = [
    "BatchResult",
    "EventOutcome",
    "FetchError",
    "IOutboxEventReader",
    "OutboxError",
    "OutboxEvent",
    "OutboxEventHandler",
]
