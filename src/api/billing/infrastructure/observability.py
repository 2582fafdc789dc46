"""Observability probes for billing infrastructure."""

from __future__ import annotations

from typing import Protocol

import structlog


class EventPublisherProbe(Protocol):
    """Domain probe for the producer side of the outbox."""

    def event_appended(
        self, event_id: str, event_type: str, organization_id: str
    ) -> None:
        """Record that an event was appended to the outbox."""
        ...


class DefaultEventPublisherProbe:
    """Default implementation of EventPublisherProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger().bind(
            component="billing_event_publisher"
        )

    def event_appended(
        self, event_id: str, event_type: str, organization_id: str
    ) -> None:
        self._logger.debug(
            "billing_event_appended",
            event_id=event_id,
            event_type=event_type,
            organization_id=organization_id,
        )
