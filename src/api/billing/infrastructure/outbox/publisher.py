"""Producer side of the billing outbox.

The organization write path publishes organization.created through this
publisher inside its own transaction, so the event is recorded if and
only if the organization is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from billing.domain.events import ORGANIZATION_CREATED
from billing.infrastructure.observability import (
    DefaultEventPublisherProbe,
    EventPublisherProbe,
)
from billing.infrastructure.outbox.serializer import OrganizationCreatedSerializer

if TYPE_CHECKING:
    from billing.domain.events import OrganizationCreated
    from infrastructure.outbox.repository import OutboxRepository


class OrganizationEventPublisher:
    """Validates organization events and appends them to the outbox."""

    def __init__(
        self,
        outbox: OutboxRepository,
        serializer: OrganizationCreatedSerializer | None = None,
        probe: EventPublisherProbe | None = None,
    ) -> None:
        """Initialize the publisher.

        Args:
            outbox: Outbox repository sharing the caller's session
            serializer: Payload serializer
            probe: Optional probe for observability
        """
        self._outbox = outbox
        self._serializer = serializer or OrganizationCreatedSerializer()
        self._probe = probe or DefaultEventPublisherProbe()

    async def publish(self, topic: str, payload: bytes | str) -> str:
        """Append a raw payload to the outbox under the given topic.

        The payload is decoded and validated with the same rules the
        consumer applies, so a malformed event is rejected at the source
        instead of being retried forever downstream.

        Args:
            topic: Event type tag (e.g., "organization.created")
            payload: JSON payload with at least organization_id

        Returns:
            The ULID of the appended event

        Raises:
            ValueError: If the topic is not supported
            DecodeError: If the payload is not a JSON object
            ValidationError: If organization_id is missing or empty
            IdentifierFormatError: If organization_id is not a valid ULID
        """
        if topic not in self._serializer.supported_event_types():
            raise ValueError(f"Unsupported event type: {topic}")

        event = self._serializer.deserialize(payload)
        return await self._append(topic, event)

    async def publish_organization_created(self, event: OrganizationCreated) -> str:
        """Append an OrganizationCreated event to the outbox."""
        return await self._append(ORGANIZATION_CREATED, event)

    async def _append(self, topic: str, event: OrganizationCreated) -> str:
        organization_id = event.organization_id.value
        event_id = await self._outbox.append(
            event_type=topic,
            organization_id=organization_id,
            payload=self._serializer.serialize(event),
        )
        self._probe.event_appended(event_id, topic, organization_id)
        return event_id
