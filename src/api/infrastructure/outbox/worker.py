"""Outbox consumer for processing pending billing events.

The consumer runs as a background task within the FastAPI application,
polling the outbox table on a fixed interval and handing each pending
event to a bounded-context handler.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from shared_kernel.outbox.exceptions import FetchError
from shared_kernel.outbox.value_objects import BatchResult, EventOutcome

if TYPE_CHECKING:
    from shared_kernel.outbox.observability import OutboxConsumerProbe
    from shared_kernel.outbox.ports import IOutboxEventReader, OutboxEventHandler
    from shared_kernel.outbox.value_objects import OutboxEvent


def _utc_now() -> datetime:
    return datetime.now(UTC)


class OutboxConsumer:
    """Background consumer that polls the outbox and publishes events.

    Delivery is at least once: an event is only marked published by the
    handler's own transaction, so anything that fails before that commit
    is picked up again by a later poll. Failures are isolated per event;
    one bad event never blocks the rest of its batch.

    The consumer uses a plugin architecture for event handling:
    - A handler is injected and declares the event type it consumes
    - This keeps the consumer generic and bounded-context agnostic
    """

    def __init__(
        self,
        store: IOutboxEventReader,
        handler: OutboxEventHandler,
        probe: OutboxConsumerProbe,
        poll_interval_seconds: float = 5,
        batch_size: int = 50,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the consumer.

        Args:
            store: Reader for pending outbox events
            handler: Handler applying the side effect for one event type
            probe: Observability probe for logging
            poll_interval_seconds: Delay between the end of one poll and the next
            batch_size: Maximum events fetched per poll
            clock: Source of the processing instant
        """
        self._store = store
        self._handler = handler
        self._probe = probe
        self._poll_interval = poll_interval_seconds
        self._batch_size = batch_size
        self._clock = clock
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        """Whether the poll loop has been started and not stopped."""
        return self._running

    async def start(self) -> None:
        """Start the poll loop as a background task."""
        if self._running:
            return

        self._running = True
        self._probe.consumer_started()
        self._task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Gracefully stop the consumer.

        Cancels the poll loop and waits for it to finish. An event being
        handled at that moment has its transaction rolled back.
        """
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self._probe.consumer_stopped()

    async def _poll_loop(self) -> None:
        """Run polls back to back, sleeping poll_interval between them."""
        self._probe.poll_loop_started()

        while self._running:
            try:
                await self.process_pending()
            except Exception as e:
                # Log error but continue polling
                self._probe.poll_failed(e)

            await asyncio.sleep(self._poll_interval)

    async def process_pending(self) -> BatchResult:
        """Fetch one batch of pending events and handle each of them.

        Returns:
            One outcome per fetched event, in processing order

        Raises:
            FetchError: If the batch could not be fetched
        """
        event_type = self._handler.event_type

        try:
            events = await self._store.fetch_pending(event_type, self._batch_size)
        except FetchError:
            raise
        except Exception as e:
            raise FetchError(f"Failed to fetch pending {event_type} events") from e

        self._probe.batch_fetched(event_type, len(events))

        outcomes = [await self._process_event(event) for event in events]
        return BatchResult(outcomes=tuple(outcomes))

    async def _process_event(self, event: OutboxEvent) -> EventOutcome:
        """Handle a single event, converting any failure into an outcome."""
        try:
            await self._handler.handle(event, self._clock())
        except Exception as e:
            self._probe.event_processing_failed(event.id, event.event_type, e)
            return EventOutcome(event_id=event.id, event_type=event.event_type, error=e)

        self._probe.event_processed(event.id, event.event_type)
        return EventOutcome(event_id=event.id, event_type=event.event_type)
