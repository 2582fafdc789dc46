"""Store protocols (ports) for billing provisioning.

The store is the only collaborator of the provisioning core. It reads
pending events and opens transactions in which a billing workspace is
created and the source event is marked published together.
"""

from __future__ import annotations

from datetime import datetime
from types import TracebackType
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from shared_kernel.outbox.ports import IOutboxEventReader

if TYPE_CHECKING:
    from billing.domain.value_objects import BillingWorkspaceId, OrganizationId


@runtime_checkable
class IProvisioningTransaction(Protocol):
    """One unit of work for a single outbox event.

    Used as an async context manager. Leaving the block with an exception
    rolls back; leaving it normally without commit() also rolls back.
    The underlying session is always released.
    """

    async def __aenter__(self) -> IProvisioningTransaction: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def workspace_exists_for_organization(
        self, organization_id: OrganizationId
    ) -> bool:
        """Check whether the organization already has a billing workspace.

        Raises:
            ResourceCreationError: If the check fails
        """
        ...

    async def create_workspace(
        self,
        workspace_id: BillingWorkspaceId,
        organization_id: OrganizationId,
        now: datetime,
    ) -> None:
        """Insert a billing workspace for the organization.

        Raises:
            ResourceCreationError: If the insert fails, including a unique
                constraint violation on organization_id
        """
        ...

    async def mark_published(self, event_id: str, now: datetime) -> None:
        """Set published = true and published_at = now on the event.

        Raises:
            MarkPublishedError: If the update fails or matches no event
        """
        ...

    async def commit(self) -> None:
        """Commit the unit of work.

        Raises:
            ResourceCreationError: If the commit fails
        """
        ...

    async def rollback(self) -> None:
        """Discard every change made in the unit of work."""
        ...


@runtime_checkable
class IProvisioningStore(IOutboxEventReader, Protocol):
    """Event store adapter used by billing provisioning."""

    def begin(self) -> IProvisioningTransaction:
        """Open a new transaction on its own session."""
        ...
