"""SQLAlchemy ORM model for the billing_workspaces table.

A billing workspace is provisioned once per organization when its
organization.created event is consumed from the outbox.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base


class BillingWorkspaceModel(Base):
    """ORM model for billing_workspaces table.

    Unique Constraint:
    - organization_id is unique. The provisioner checks for an existing
      workspace before inserting, and this constraint rejects the loser
      when two consumers race on the same organization.
    """

    __tablename__ = "billing_workspaces"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    organization_id: Mapped[str] = mapped_column(String(26), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "organization_id", name="uq_billing_workspaces_organization_id"
        ),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<BillingWorkspaceModel(id={self.id}, "
            f"organization_id={self.organization_id})>"
        )
