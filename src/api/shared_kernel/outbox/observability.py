"""Observability probes for the outbox consumer.

Following Domain Oriented Observability, probes capture domain-significant
events without cluttering business logic with logging concerns.
"""

from __future__ import annotations

from typing import Protocol

import structlog


logger = structlog.get_logger()


class OutboxConsumerProbe(Protocol):
    """Protocol for outbox consumer observability.

    Implementations can log, emit metrics, or send traces.
    """

    def consumer_started(self) -> None:
        """Called when the consumer starts."""
        ...

    def consumer_stopped(self) -> None:
        """Called when the consumer stops."""
        ...

    def poll_loop_started(self) -> None:
        """Called when the poll loop starts."""
        ...

    def batch_fetched(self, event_type: str, count: int) -> None:
        """Called after pending events are fetched."""
        ...

    def event_processed(self, event_id: str, event_type: str) -> None:
        """Called when an event is handled and published."""
        ...

    def event_processing_failed(
        self, event_id: str, event_type: str, error: Exception
    ) -> None:
        """Called when handling an event fails. The event will be retried."""
        ...

    def poll_failed(self, error: Exception) -> None:
        """Called when a whole poll iteration fails."""
        ...


class DefaultOutboxConsumerProbe:
    """Default implementation using structlog.

    Logs all consumer events with appropriate log levels.
    """

    def __init__(self, component: str = "outbox_consumer") -> None:
        """Initialize the probe with a logger."""
        self._log = logger.bind(component=component)

    def consumer_started(self) -> None:
        """Log consumer start."""
        self._log.info("outbox_consumer_started")

    def consumer_stopped(self) -> None:
        """Log consumer stop."""
        self._log.info("outbox_consumer_stopped")

    def poll_loop_started(self) -> None:
        """Log poll loop start."""
        self._log.info("outbox_poll_loop_started")

    def batch_fetched(self, event_type: str, count: int) -> None:
        """Log fetched batch size. Empty polls are not logged."""
        if count > 0:
            self._log.info("outbox_batch_fetched", event_type=event_type, count=count)

    def event_processed(self, event_id: str, event_type: str) -> None:
        """Log successful event processing."""
        self._log.info(
            "outbox_event_processed",
            event_id=event_id,
            event_type=event_type,
        )

    def event_processing_failed(
        self, event_id: str, event_type: str, error: Exception
    ) -> None:
        """Log failed event processing that will be retried."""
        self._log.error(
            "outbox_event_processing_failed",
            event_id=event_id,
            event_type=event_type,
            error=str(error),
            error_type=type(error).__name__,
        )

    def poll_failed(self, error: Exception) -> None:
        """Log poll iteration failure."""
        self._log.error(
            "outbox_poll_failed",
            error=str(error),
            error_type=type(error).__name__,
        )
