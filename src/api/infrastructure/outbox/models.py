"""SQLAlchemy ORM models for the outbox pattern.

This module provides the database model for the billing_events table used
in the transactional outbox pattern.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base
from shared_kernel.outbox.value_objects import OutboxEvent


class BillingEventModel(Base):
    """ORM model for the billing_events table.

    Stores domain events recorded by upstream write paths in the same
    transaction as their business data. The consumer reads unpublished
    rows and flips them to published once their side effect is applied.

    The table uses a partial index for efficient polling:
    - idx_billing_events_unpublished: For fetching pending events by type
    """

    __tablename__ = "billing_events"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    organization_id: Mapped[str] = mapped_column(
        String(26), nullable=False, index=True
    )
    event_type: Mapped[str] = mapped_column(String(255), nullable=False)
    payload: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, server_default=text("'{}'::jsonb")
    )
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    )

    __table_args__ = (
        Index(
            "idx_billing_events_unpublished",
            "event_type",
            "created_at",
            postgresql_where=text("published = false"),
        ),
    )

    def to_value_object(self) -> OutboxEvent:
        """Convert this ORM model to an OutboxEvent value object."""
        return OutboxEvent(
            id=self.id,
            organization_id=self.organization_id,
            event_type=self.event_type,
            payload=self.payload,
            created_at=self.created_at,
            published=self.published,
            published_at=self.published_at,
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<BillingEventModel("
            f"id={self.id}, "
            f"event_type={self.event_type}, "
            f"published={self.published}"
            f")>"
        )
