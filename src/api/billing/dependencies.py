"""Construction of the billing provisioning consumer."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from billing.application.handlers import OrganizationCreatedHandler
from billing.application.provisioning import BillingWorkspaceProvisioner
from billing.infrastructure.provisioning_store import SqlAlchemyProvisioningStore
from infrastructure.outbox.worker import OutboxConsumer
from infrastructure.settings import OutboxConsumerSettings
from shared_kernel.outbox.observability import DefaultOutboxConsumerProbe


def create_provisioning_consumer(
    session_factory: async_sessionmaker[AsyncSession],
    settings: OutboxConsumerSettings,
) -> OutboxConsumer:
    """Build the consumer that provisions billing workspaces.

    Args:
        session_factory: Factory for database sessions on the shared engine
        settings: Poll interval and batch size

    Returns:
        An OutboxConsumer ready to start()
    """
    store = SqlAlchemyProvisioningStore(session_factory)
    handler = OrganizationCreatedHandler(BillingWorkspaceProvisioner(store))

    return OutboxConsumer(
        store=store,
        handler=handler,
        probe=DefaultOutboxConsumerProbe(component="billing_provisioning_consumer"),
        poll_interval_seconds=settings.poll_interval_seconds,
        batch_size=settings.batch_size,
    )
