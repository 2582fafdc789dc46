"""Billing workspace provisioning.

Ensures exactly one billing workspace per organization and records the
source event as published, as a single atomic unit of work.
"""

from __future__ import annotations

from datetime import datetime

from billing.application.observability import (
    DefaultProvisioningProbe,
    ProvisioningProbe,
)
from billing.domain.value_objects import BillingWorkspaceId, OrganizationId
from billing.ports.repositories import IProvisioningStore


class BillingWorkspaceProvisioner:
    """Idempotently provisions billing workspaces.

    Redelivery is safe: a workspace that already exists is left alone and
    only the event is marked published. The existence check is not
    race-free on its own; the unique constraint on organization_id in the
    store rejects a concurrent duplicate, which rolls that attempt back.
    """

    def __init__(
        self,
        store: IProvisioningStore,
        probe: ProvisioningProbe | None = None,
    ):
        """Initialize the provisioner.

        Args:
            store: Store providing per-event transactions
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultProvisioningProbe()

    async def apply(
        self,
        event_id: str,
        organization_id: OrganizationId,
        now: datetime,
    ) -> bool:
        """Ensure the organization has a workspace and publish the event.

        Args:
            event_id: ULID of the source event
            organization_id: Organization to provision for
            now: Processing instant, used for created_at and published_at

        Returns:
            True if a workspace was created, False if it already existed

        Raises:
            ResourceCreationError: If the workspace check, insert or commit fails
            MarkPublishedError: If the event cannot be marked published
        """
        async with self._store.begin() as txn:
            workspace_id: BillingWorkspaceId | None = None
            try:
                if not await txn.workspace_exists_for_organization(organization_id):
                    workspace_id = BillingWorkspaceId.generate()
                    await txn.create_workspace(workspace_id, organization_id, now)

                await txn.mark_published(event_id, now)
                await txn.commit()
            except Exception as e:
                try:
                    await txn.rollback()
                finally:
                    self._probe.provisioning_rolled_back(
                        event_id, organization_id.value, e
                    )
                raise

        if workspace_id is None:
            self._probe.workspace_already_exists(event_id, organization_id.value)
            return False

        self._probe.workspace_created(event_id, organization_id.value, workspace_id.value)
        return True
