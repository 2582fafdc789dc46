"""Outbox event handlers for the billing bounded context."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from billing.domain.events import ORGANIZATION_CREATED
from billing.infrastructure.outbox.serializer import OrganizationCreatedSerializer

if TYPE_CHECKING:
    from billing.application.provisioning import BillingWorkspaceProvisioner
    from shared_kernel.outbox.value_objects import OutboxEvent


class OrganizationCreatedHandler:
    """Provisions a billing workspace for each organization.created event.

    Decoding happens before any transaction is opened. A payload that
    fails to decode never reaches the store and is retried on every poll.
    """

    def __init__(
        self,
        provisioner: BillingWorkspaceProvisioner,
        serializer: OrganizationCreatedSerializer | None = None,
    ):
        self._provisioner = provisioner
        self._serializer = serializer or OrganizationCreatedSerializer()

    @property
    def event_type(self) -> str:
        return ORGANIZATION_CREATED

    async def handle(self, event: OutboxEvent, now: datetime) -> None:
        payload = self._serializer.deserialize(event.payload)
        await self._provisioner.apply(event.id, payload.organization_id, now)
