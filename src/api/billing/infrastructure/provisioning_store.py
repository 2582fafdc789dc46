"""PostgreSQL implementation of the billing provisioning store.

Reads pending organization events from the billing_events outbox and
provides per-event transactions in which a billing workspace is created
and the event is marked published together.
"""

from __future__ import annotations

from datetime import datetime
from types import TracebackType

from sqlalchemy import exists, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from billing.domain.value_objects import BillingWorkspaceId, OrganizationId
from billing.infrastructure.models import BillingWorkspaceModel
from billing.ports.exceptions import MarkPublishedError, ResourceCreationError
from infrastructure.outbox.models import BillingEventModel
from shared_kernel.outbox.exceptions import FetchError
from shared_kernel.outbox.value_objects import OutboxEvent


class SqlAlchemyProvisioningStore:
    """Event store adapter backed by an async SQLAlchemy session factory.

    Every call gets its own session. The fetch runs in a short read-only
    transaction; each event is then processed in a separate transaction
    opened with begin().
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the store.

        Args:
            session_factory: Factory for creating database sessions
        """
        self._session_factory = session_factory

    async def fetch_pending(self, event_type: str, limit: int) -> list[OutboxEvent]:
        """Fetch unpublished events of one type, oldest first.

        Ties on created_at are broken by id, which is creation-ordered.

        Args:
            event_type: Type tag to filter on
            limit: Maximum number of events to return

        Returns:
            List of unpublished OutboxEvent value objects

        Raises:
            FetchError: If the database cannot be queried
        """
        stmt = (
            select(BillingEventModel)
            .where(BillingEventModel.event_type == event_type)
            .where(BillingEventModel.published.is_(False))
            .order_by(BillingEventModel.created_at, BillingEventModel.id)
            .limit(limit)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                models = result.scalars().all()
                return [model.to_value_object() for model in models]
        except (SQLAlchemyError, OSError) as e:
            raise FetchError(f"Failed to fetch pending {event_type} events: {e}") from e

    def begin(self) -> SqlAlchemyProvisioningTransaction:
        """Open a transaction on a fresh session."""
        return SqlAlchemyProvisioningTransaction(self._session_factory())


class SqlAlchemyProvisioningTransaction:
    """One unit of work for a single outbox event.

    The session autobegins on the first statement. Exiting the context
    without a successful commit() rolls everything back.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._finished = False

    async def __aenter__(self) -> SqlAlchemyProvisioningTransaction:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self._finished:
                await self.rollback()
        finally:
            await self._session.close()

    async def workspace_exists_for_organization(
        self, organization_id: OrganizationId
    ) -> bool:
        """Check for an existing billing workspace by its unique key."""
        stmt = select(
            exists().where(
                BillingWorkspaceModel.organization_id == organization_id.value
            )
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise ResourceCreationError(
                f"Failed to check billing workspace for organization "
                f"{organization_id}: {e}"
            ) from e
        return bool(result.scalar())

    async def create_workspace(
        self,
        workspace_id: BillingWorkspaceId,
        organization_id: OrganizationId,
        now: datetime,
    ) -> None:
        """Insert the workspace and flush so constraint violations surface here."""
        model = BillingWorkspaceModel(
            id=workspace_id.value,
            organization_id=organization_id.value,
            created_at=now,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise ResourceCreationError(
                f"Failed to create billing workspace for organization "
                f"{organization_id}: {e}"
            ) from e

    async def mark_published(self, event_id: str, now: datetime) -> None:
        """Flip the event to published.

        Only an unpublished row matches, so a second consumer that lost a
        race on the same event fails here instead of publishing twice.
        """
        stmt = (
            update(BillingEventModel)
            .where(BillingEventModel.id == event_id)
            .where(BillingEventModel.published.is_(False))
            .values(published=True, published_at=now)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise MarkPublishedError(
                f"Failed to mark event {event_id} published: {e}"
            ) from e

        if result.rowcount == 0:
            raise MarkPublishedError(
                f"Event {event_id} does not exist or is already published"
            )

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            raise ResourceCreationError(f"Failed to commit provisioning: {e}") from e
        self._finished = True

    async def rollback(self) -> None:
        self._finished = True
        await self._session.rollback()
