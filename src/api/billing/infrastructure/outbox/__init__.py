"""Billing outbox plugins: payload serializer and event publisher."""

from billing.infrastructure.outbox.publisher import OrganizationEventPublisher
from billing.infrastructure.outbox.serializer import OrganizationCreatedSerializer

__all__ = ["OrganizationCreatedSerializer", "OrganizationEventPublisher"]
