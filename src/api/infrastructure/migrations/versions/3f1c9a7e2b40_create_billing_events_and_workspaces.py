"""create_billing_events_and_workspaces

Create the billing_events outbox table and the billing_workspaces table.
The unique constraint on billing_workspaces.organization_id guarantees at
most one workspace per organization even when consumers race.

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "billing_events",
        sa.Column("id", sa.String(length=26), nullable=False),  # ULID
        sa.Column("organization_id", sa.String(length=26), nullable=False),
        sa.Column(
            "event_type", sa.String(length=255), nullable=False
        ),  # e.g., "organization.created"
        sa.Column(
            "payload",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "published",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "published_at", sa.DateTime(timezone=True), nullable=True
        ),  # NULL until published
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_billing_events"),
    )
    op.create_index(
        "ix_billing_events_organization_id",
        "billing_events",
        ["organization_id"],
        unique=False,
    )
    # Poll query: WHERE event_type = ? AND published = false ORDER BY created_at
    op.create_index(
        "idx_billing_events_unpublished",
        "billing_events",
        ["event_type", "created_at"],
        unique=False,
        postgresql_where=sa.text("published = false"),
    )

    op.create_table(
        "billing_workspaces",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("organization_id", sa.String(length=26), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_billing_workspaces"),
        sa.UniqueConstraint(
            "organization_id", name="uq_billing_workspaces_organization_id"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("billing_workspaces")
    op.drop_index("idx_billing_events_unpublished", table_name="billing_events")
    op.drop_index("ix_billing_events_organization_id", table_name="billing_events")
    op.drop_table("billing_events")
