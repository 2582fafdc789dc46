"""Outbox repository implementation.

This module provides the PostgreSQL implementation of the producer side of
the outbox. It persists domain events to the billing_events table for later
processing by the consumer.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from ulid import ULID

from infrastructure.outbox.models import BillingEventModel


class OutboxRepository:
    """PostgreSQL implementation of the outbox repository.

    This repository shares the same database session as the calling service,
    ensuring that event appends happen within the same transaction as the
    business data changes. This is critical for the atomicity guarantee of
    the outbox pattern.

    The repository only calls session.add() - it never calls
    session.commit(). The calling service owns the transaction boundary.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with a session.

        Args:
            session: The SQLAlchemy async session (shared with calling service)
        """
        self._session = session

    async def append(
        self,
        event_type: str,
        organization_id: str,
        payload: dict[str, Any],
    ) -> str:
        """Append a pre-serialized event within the current transaction.

        Args:
            event_type: Type tag of the event (e.g., "organization.created")
            organization_id: ULID of the organization the event concerns
            payload: Pre-serialized event data as a dictionary

        Returns:
            The ULID assigned to the new event
        """
        event_id = str(ULID())
        model = BillingEventModel(
            id=event_id,
            organization_id=organization_id,
            event_type=event_type,
            payload=payload,
            published=False,
            published_at=None,
        )

        self._session.add(model)
        return event_id
