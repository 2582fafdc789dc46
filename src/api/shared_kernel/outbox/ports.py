"""Protocols (ports) for the outbox pattern.

These protocols define the interfaces the outbox consumer depends on. They
enable a plugin architecture where each bounded context registers its own
event handler without shared_kernel knowing about it.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shared_kernel.outbox.value_objects import OutboxEvent


@runtime_checkable
class IOutboxEventReader(Protocol):
    """Read access to pending outbox events."""

    async def fetch_pending(self, event_type: str, limit: int) -> list[OutboxEvent]:
        """Fetch unpublished events of one type, oldest first.

        Args:
            event_type: Type tag to filter on (e.g., "organization.created")
            limit: Maximum number of events to return

        Returns:
            Unpublished events ordered by created_at ascending

        Raises:
            FetchError: If the store cannot be queried
        """
        ...


@runtime_checkable
class OutboxEventHandler(Protocol):
    """Applies the side effect of one event type and publishes the event.

    Each bounded context provides its own implementation. A handler must
    be idempotent: the consumer delivers at least once, so the same event
    can be handled again after a crash or a failed commit.
    """

    @property
    def event_type(self) -> str:
        """The type tag this handler consumes."""
        ...

    async def handle(self, event: OutboxEvent, now: datetime) -> None:
        """Apply the event and mark it published in one transaction.

        Args:
            event: The pending event
            now: The processing instant

        Raises:
            Exception: Any failure; the event stays unpublished
        """
        ...
