"""Value objects for the outbox pattern.

Value objects are immutable descriptors that provide type safety and
domain semantics for outbox events and their processing outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class OutboxEvent:
    """Represents a single row in the billing_events outbox table.

    This is an immutable value object that captures the state of an event
    as it exists in the database when it was fetched for processing.

    Attributes:
        id: ULID of the event (creation-ordered)
        organization_id: ULID of the organization the event concerns
        event_type: Type tag selecting payload schema (e.g., "organization.created")
        payload: Serialized event data, either raw JSON text/bytes or a decoded mapping
        created_at: When the event was recorded by the producer
        published: Whether the event has been published
        published_at: When the event was published (None if unpublished)
    """

    id: str
    organization_id: str
    event_type: str
    payload: bytes | str | dict[str, Any]
    created_at: datetime
    published: bool = False
    published_at: datetime | None = None


@dataclass(frozen=True)
class EventOutcome:
    """Result of processing a single outbox event.

    Attributes:
        event_id: ULID of the event
        event_type: Type tag of the event
        error: The exception raised while processing, or None on success
    """

    event_id: str
    event_type: str
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        """True when the event was published without error."""
        return self.error is None


@dataclass(frozen=True)
class BatchResult:
    """Per-event outcomes of one poll, in processing order.

    A poll never raises because of a single bad event. Callers inspect
    this result to see which events were published and which were left
    for the next poll.
    """

    outcomes: tuple[EventOutcome, ...] = ()

    @property
    def processed(self) -> tuple[EventOutcome, ...]:
        """Outcomes of events that were published."""
        return tuple(outcome for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> tuple[EventOutcome, ...]:
        """Outcomes of events that remain unpublished."""
        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    def __len__(self) -> int:
        return len(self.outcomes)
